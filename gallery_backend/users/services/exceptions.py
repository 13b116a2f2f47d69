# users/services/exceptions.py


class AccountError(Exception):
    code = "ACCOUNT_ERROR"


class MissingUserIdError(AccountError):
    code = "UID_REQUIRED"


class SelfRoleChangeError(AccountError):
    code = "SELF_ROLE_CHANGE"


class UserNotFoundError(AccountError):
    code = "USER_NOT_FOUND"


class InvalidVerificationTokenError(AccountError):
    code = "INVALID_TOKEN"


class AlreadyVerifiedError(AccountError):
    code = "ALREADY_VERIFIED"
