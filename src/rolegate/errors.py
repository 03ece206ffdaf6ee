"""
rolegate.errors

Failure taxonomy of the core.

Responsibilities:
- Give every failure a distinguishable kind the presentation layer can map to a message.
- Carry a readable default message per kind; raise sites may override it.
"""

from __future__ import annotations


class RoleGateError(Exception):
    default_message = "Operation failed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class InvalidCredentialsError(RoleGateError):
    default_message = "The provided credentials are invalid."


class UserNotFoundError(RoleGateError):
    default_message = "The user profile was not found."


class UserNotAuthorizedError(RoleGateError):
    default_message = "User is not authorized to perform this operation."


class RegistrationIncompleteError(RoleGateError):
    """
    The identity exists at the gateway but its profile row could not be stored.
    """

    default_message = "Identity was created but the user profile could not be stored."

    def __init__(self, identity_id: str, message: str | None = None) -> None:
        super().__init__(message)
        self.identity_id = identity_id


class DuplicateNameError(RoleGateError):
    default_message = "A role with this name already exists."


class ResourceInUseError(RoleGateError):
    default_message = "The role is assigned to one or more users and cannot be deleted."


class RoleNotFoundError(RoleGateError):
    default_message = "Role not found or no changes applied."


class InvalidArgumentError(RoleGateError):
    default_message = "A required field is missing."


class InfrastructureError(RoleGateError):
    default_message = "Storage or gateway failure."


class AuthenticationFailedError(InfrastructureError):
    default_message = "Authentication failed."


class RowShapeError(InfrastructureError):
    default_message = "Storage returned a row with an unexpected shape."


# --- Module Notes -----------------------------------------------------------
# Adapters raise these at the storage/gateway boundary; use cases only add
# UserNotAuthorizedError and InvalidArgumentError in front of them.
