"""aclsync - declarative ACL reconciliation for platform objects."""

__version__ = "0.1.0"
