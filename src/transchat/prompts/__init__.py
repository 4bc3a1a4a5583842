"""Prompt management module.

Externalizes the general prompt to a text file for easy customization.
Prompts can be overridden by placing files in the working directory.
"""

from functools import lru_cache
from pathlib import Path

# Default prompts directory (package location)
_PROMPTS_DIR = Path(__file__).parent

# Seeded after the general prompt; they tell the model about the REPL commands
COMMAND_INSTRUCTIONS = (
    "The user can reset the current state of the chat by inputting 'reset'.",
    "The user can activate the editor by entering 'v', allowing them to input multiple lines of prompts.",
    'To terminate, the user needs to input "exit".',
)


@lru_cache(maxsize=16)
def load_prompt(name: str) -> str:
    """Load a prompt from file.

    Search order:
    1. Current working directory: ./prompts/{name}.txt
    2. Package prompts directory: transchat/prompts/{name}.txt

    Args:
        name: Prompt name (without .txt extension)

    Returns:
        Prompt text content, stripped of surrounding whitespace

    Raises:
        FileNotFoundError: If prompt file not found in any location
    """
    filename = f"{name}.txt"

    local_path = Path.cwd() / "prompts" / filename
    if local_path.exists():
        return local_path.read_text(encoding="utf-8").strip()

    package_path = _PROMPTS_DIR / filename
    if package_path.exists():
        return package_path.read_text(encoding="utf-8").strip()

    raise FileNotFoundError(
        f"Prompt '{name}' not found. Searched:\n"
        f"  - {local_path}\n"
        f"  - {package_path}"
    )


def get_general_prompt() -> str:
    """Get the default general prompt (Japanese to English translation)."""
    return load_prompt("general")


def clear_cache() -> None:
    """Clear the prompt cache (useful after modifying prompt files)."""
    load_prompt.cache_clear()


__all__ = [
    "COMMAND_INSTRUCTIONS",
    "clear_cache",
    "get_general_prompt",
    "load_prompt",
]
