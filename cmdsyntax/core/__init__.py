from .message_handler import MessageCommandHandler, PrefixContext, format_usage

__all__ = ["MessageCommandHandler", "PrefixContext", "format_usage"]
