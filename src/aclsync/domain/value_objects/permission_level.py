"""Well-known permission levels and principals.

Permission levels are opaque strings whose legal values depend on the object
type (see ``aclsync.application.object_types``). Only the levels the engine
itself injects are named here.
"""

CAN_MANAGE = "CAN_MANAGE"
IS_OWNER = "IS_OWNER"

# Built-in platform group whose management rights must never be removed.
ADMIN_GROUP = "admins"
