"""
Module content boundary - fetch raw document text for a module view.

Maps (phase slug, module slug) back to a relative document path through the
canonical phase table and the slug codec, then reads the file. Each fetch
is independent; a missing or unreadable document comes back as a
placeholder rather than an exception.
"""

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Optional

from phasebook.schemas import CurriculumConfig
from phasebook.utils.slug_codec import SlugCodec

logger = logging.getLogger(__name__)


class DocumentNotFoundError(FileNotFoundError):
    """A module document could not be found at its expected path."""

    def __init__(self, message: str, expected_path: Optional[str] = None):
        super().__init__(message)
        self.expected_path = expected_path


@dataclass(frozen=True)
class ModuleContent:
    """Raw markdown for one module view."""
    phase_id: str
    module_id: str
    path: Optional[str]      # relative document path, None for an unknown phase
    text: str
    found: bool
    error: Optional[str] = None


def resolve_document_path(
    phase_id: str,
    module_id: str,
    config: CurriculumConfig | None = None,
) -> Optional[PurePosixPath]:
    """
    Relative path of a module document, e.g.
    ("phase-6", "module-6-1-modern-build-tools") ->
    Phase-6-Build-Tools-and-Development-Workflow/Module-6.1-Modern-Build-Tools.md

    Returns None when the phase slug is not in the canonical table.
    """
    config = config or CurriculumConfig()
    directory = config.phase_directory(phase_id)
    if directory is None:
        return None
    filename = SlugCodec.from_config(config).decode(module_id)
    return PurePosixPath(directory) / filename


def load_module_text(
    root: str | Path,
    phase_id: str,
    module_id: str,
    config: CurriculumConfig | None = None,
) -> str:
    """
    Read a module document.

    Raises:
        DocumentNotFoundError: Unknown phase, a slug that would leave the
            phase folder, or no file at the decoded path
        OSError, UnicodeDecodeError: The document exists but cannot be read
    """
    relative = resolve_document_path(phase_id, module_id, config)
    if relative is None:
        raise DocumentNotFoundError(f"Phase not found: {phase_id}")

    if "/" in module_id or "\\" in module_id:
        raise DocumentNotFoundError(
            f"Invalid module id: {module_id}", expected_path=str(relative)
        )

    phase_path = (Path(root) / relative.parent).resolve()
    path = Path(root) / relative
    if not path.resolve().is_relative_to(phase_path):
        raise DocumentNotFoundError(
            f"Module document outside phase folder: {relative}", expected_path=str(relative)
        )
    if not path.is_file():
        raise DocumentNotFoundError(
            f"Module document not found: {relative}", expected_path=str(relative)
        )
    return path.read_text(encoding="utf-8")


def placeholder_text(title: str, expected: str) -> str:
    """Markdown shown in place of a document that could not be loaded."""
    return (
        f"# {title}\n\n"
        "The full content for this module should be loaded from the curriculum files. "
        "If you're seeing this message, it means the markdown file couldn't be loaded.\n\n"
        f"**File being requested:** `{expected}`\n\n"
        "**Suggested solutions:**\n"
        "- Ensure the file exists in the curriculum directory\n"
        "- Check that the file naming matches exactly\n"
    )


async def fetch_module_content(
    root: str | Path,
    phase_id: str,
    module_id: str,
    title: str = "",
    config: CurriculumConfig | None = None,
) -> ModuleContent:
    """
    Fetch one module document without blocking the event loop.

    A missing or unreadable document is reported through ModuleContent.found
    and a placeholder text naming the path that was expected.
    """
    config = config or CurriculumConfig()
    relative = resolve_document_path(phase_id, module_id, config)
    try:
        text = await asyncio.to_thread(load_module_text, root, phase_id, module_id, config)
    except DocumentNotFoundError as e:
        expected = e.expected_path or SlugCodec.from_config(config).decode(module_id)
        logger.warning(f"Error loading markdown: {e}")
        error = f"Unable to load {expected}. The file may not exist."
    except (OSError, UnicodeDecodeError) as e:
        expected = str(relative)
        logger.error(f"Error reading markdown {expected}: {e}")
        error = f"Unable to read {expected}: {e}"
    else:
        return ModuleContent(
            phase_id=phase_id,
            module_id=module_id,
            path=str(relative),
            text=text,
            found=True,
        )

    return ModuleContent(
        phase_id=phase_id,
        module_id=module_id,
        path=str(relative) if relative is not None else None,
        text=placeholder_text(title or module_id, expected),
        found=False,
        error=error,
    )
