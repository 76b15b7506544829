"""Commands - Write operations that change state.

Commands represent caller intent. They are immutable dataclasses with
imperative names (LoginUser, ExtractInvoice); each has a handler in
``commands/handlers``.
"""

from src.application.commands.auth_commands import LoginResult, LoginUser, LogoutUser
from src.application.commands.extract_commands import ExtractInvoice, ExtractionOutcome

__all__ = [
    # Auth commands
    "LoginResult",
    "LoginUser",
    "LogoutUser",
    # Extraction commands
    "ExtractInvoice",
    "ExtractionOutcome",
]
