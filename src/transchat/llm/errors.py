"""Error types raised by transchat.

SDK errors (network failures, authentication, rate limits) are not wrapped;
they propagate from the provider unchanged.
"""


class TranschatError(Exception):
    """Base exception for transchat errors."""


class MissingAPIKeyError(TranschatError):
    """No API credential was given on the command line or in the environment."""

    def __init__(self, env_var: str = "OPENAI_API_KEY"):
        super().__init__(f"You need to set API key to the `{env_var}`")
        self.env_var = env_var


class EmptyCompletionError(TranschatError):
    """The completion response contained no choices."""

    def __init__(self, model: str):
        super().__init__(f"Can't read {model} output: the response contained no choices")
        self.model = model
