"""Loading of the static console text shipped as .txt files."""
from pathlib import Path
import typing as t

PROMPTS_DIR = Path(__file__).resolve().parent


def load_prompt(prompt_name: str, prompts_dir: t.Optional[str] = None) -> str:
    """
    Load console text from a file in the prompts directory.

    Args:
        prompt_name: Name of the text file (without .txt extension)
        prompts_dir: Optional directory to read from instead of this package.

    Returns:
        The file content with the trailing newline removed.

    Raises:
        FileNotFoundError: If the prompt file doesn't exist.
    """
    prompt_file = Path(prompts_dir or PROMPTS_DIR) / f"{prompt_name}.txt"

    if not prompt_file.is_file():
        raise FileNotFoundError(f"Prompt file not found: {prompt_file}")

    return prompt_file.read_text(encoding="utf-8").rstrip("\n")
