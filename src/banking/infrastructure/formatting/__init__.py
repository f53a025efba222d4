from .text_formatter import TextStatementFormatter, STATEMENT_HEADER

__all__ = ["TextStatementFormatter", "STATEMENT_HEADER"]
