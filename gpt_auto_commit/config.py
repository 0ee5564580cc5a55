"""Static settings for gpt-auto-commit.

User-editable values (API key, model) live in ~/.gpt-auto-commit/config.yaml
and are managed through 'gpt-auto-commit config'.
"""

# ============================================================
# DEFAULT FALLBACK VALUES
# ============================================================
# Used when ~/.gpt-auto-commit/config.yaml is missing or incomplete

DEFAULT_MODEL = "gpt-4o-mini"

# Output cap for a single-line commit message
MAX_TOKENS = 100

# Used when the model answers without any text
FALLBACK_COMMIT_MESSAGE = "chore: update code"

# Checked when no key is stored in the config file
API_KEY_ENV_VAR = "OPENAI_API_KEY"


# ============================================================
# KNOWN MODELS
# ============================================================
# Only shown in help output; any model name is accepted.

AVAILABLE_MODELS = [
    "gpt-5-mini",
    "gpt-5-nano",
    "gpt-4.1",
    "gpt-4.1-mini",
    "gpt-4.1-nano",
    "gpt-4o",
    "gpt-4o-mini",
]
