"""Command handlers."""

from src.application.commands.handlers.extract_invoice_handler import (
    ExtractInvoiceHandler,
)
from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.application.commands.handlers.logout_user_handler import LogoutUserHandler

__all__ = ["ExtractInvoiceHandler", "LoginUserHandler", "LogoutUserHandler"]
