"""
Configuration constants shared across the highlighter and the mdbook host
"""

# Preprocessor identity
PREPROCESSOR_NAME = "rust-highlight"
SUPPORTED_RENDERERS = ("html",)

# Code fence language identifier: ```hlrs[,key=value,...]
FENCE_LANGUAGE = "hlrs"
FEATURE_SEPARATOR = ","
FEATURE_ASSIGN = "="

# Features attached to every block unless the fence overrides them
DEFAULT_FEATURES = {
    "icon": "@https://www.rust-lang.org/static/images/rust-logo-blk.svg",
}

# Markup
CSS_CLASS_PREFIX = "hlrs-"
BORING_CSS_CLASS = "boring"
OPEN_MARKER_TEMPLATE = '<span class="{css_class}">'
CLOSE_MARKER = "</span>"
CODE_BLOCK_TEMPLATE = '<pre><code class="language-{language} {features}">{code}</code></pre>'

# mdbook hidden lines
HIDDEN_LINE_MARKER = "#"
HIDDEN_LINE_ESCAPE = "##"

# Source naming for diagnostics
DEFAULT_SOURCE_NAME = "<code>"
DEFAULT_FILE_ENCODING = "utf-8"

# Environment variables
COLOR_ENV_VAR = "RUST_HIGHLIGHT_COLOR"
LOG_LEVEL_ENV_VAR = "RUST_HIGHLIGHT_LOG"
DEFAULT_LOG_LEVEL = "WARNING"

# Error codes
PARSE_ERROR_CODE = "E0001"
CONFIG_ERROR_CODE = "E0002"
IMPLEMENTATION_ERROR_CODE = "E9999"
