"""
VScript Package

Front end for the VScript scripting language.

Architecture:
    vscript/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # Command-line driver
"""

__version__ = "0.1a"
__build_id__ = "v0.1a"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, Position

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "Position",

    # Version info
    "__version__",
    "__build_id__",
    "__license__",
]
