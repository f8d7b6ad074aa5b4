from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from exam_results.config.constants import ROOT_DIR
from exam_results.utils.logger import logger


def find_dotenv_file(start_path: Optional[Path] = None) -> Optional[Path]:
    """
    Find the .env file by walking up from start_path to the filesystem root.

    Args:
        start_path: Directory to start searching from. Defaults to the project root.

    Returns:
        Path to the first .env file found, None otherwise.
    """
    directory = (start_path or ROOT_DIR).resolve()

    for candidate_dir in (directory, *directory.parents):
        env_path = candidate_dir / ".env"
        if env_path.is_file():
            return env_path

    return None


def load_environment(env_path: Optional[Path] = None) -> bool:
    """
    Load OpenRouter settings and other variables from a .env file.

    Variables already present in the process environment are not overridden.

    Args:
        env_path: Path to the .env file. If None, will search for it.

    Returns:
        True if a .env file was loaded, False otherwise.
    """
    if env_path is None:
        env_path = find_dotenv_file()

    if env_path is None or not env_path.exists():
        logger.warning("No .env file found. Using existing environment variables.")
        return False

    load_dotenv(dotenv_path=env_path, override=False)
    logger.info(f"Environment loaded from: {env_path}")
    return True
