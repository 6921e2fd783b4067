"""Application commands for the account directory."""

from agronom_identity.application.commands.authenticate_local_account_command import (
    AuthenticateLocalAccountCommand,
)
from agronom_identity.application.commands.identify_or_create_federated_account_command import (  # noqa: E501
    IdentifyOrCreateFederatedAccountCommand,
)
from agronom_identity.application.commands.register_local_account_command import (
    RegisterLocalAccountCommand,
)

__all__ = [
    "AuthenticateLocalAccountCommand",
    "IdentifyOrCreateFederatedAccountCommand",
    "RegisterLocalAccountCommand",
]
