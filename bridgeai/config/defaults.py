"""bridgeai.config.defaults
========================

Built-in defaults for each supported backend and for the client itself.
These are the lowest-precedence configuration layer; configuration files,
environment variables and explicit arguments all override them.

Only plain constants live here (no I/O, no package imports).
"""

from __future__ import annotations

# ---- Provider defaults ----
OPENAI_DEFAULT_MODEL = "gpt-4-turbo-preview"

GEMINI_DEFAULT_MODEL = "gemini-1.5-flash"

CLAUDE_DEFAULT_MODEL = "claude-3-5-sonnet-20240620"
# Anthropic requires max_tokens on every call.
CLAUDE_DEFAULT_MAX_TOKENS = 1024

PERPLEXITY_DEFAULT_MODEL = "llama-3-sonar-large-32k-online"
PERPLEXITY_DEFAULT_BASE_URL = "https://api.perplexity.ai"

DEEPSEEK_DEFAULT_MODEL = "deepseek-chat"
DEEPSEEK_DEFAULT_BASE_URL = "https://api.deepseek.com"

MOCK_DEFAULT_MODEL = "mock-model"

# ---- Client defaults ----
DEFAULT_PROVIDER = "openai"
DEFAULT_RETRIES = 2
DEFAULT_RETRY_FACTOR = 2.0
DEFAULT_RETRY_MIN_TIMEOUT_MS = 1000.0

# Instruction appended to the system prompt for backends without a native JSON mode.
JSON_MODE_INSTRUCTION = "Respond only with a single valid JSON object and no surrounding prose."


__all__ = [
    "OPENAI_DEFAULT_MODEL",
    "GEMINI_DEFAULT_MODEL",
    "CLAUDE_DEFAULT_MODEL",
    "CLAUDE_DEFAULT_MAX_TOKENS",
    "PERPLEXITY_DEFAULT_MODEL",
    "PERPLEXITY_DEFAULT_BASE_URL",
    "DEEPSEEK_DEFAULT_MODEL",
    "DEEPSEEK_DEFAULT_BASE_URL",
    "MOCK_DEFAULT_MODEL",
    "DEFAULT_PROVIDER",
    "DEFAULT_RETRIES",
    "DEFAULT_RETRY_FACTOR",
    "DEFAULT_RETRY_MIN_TIMEOUT_MS",
    "JSON_MODE_INSTRUCTION",
]
