"""Discovery and loading of GitHub issue templates.

Templates live in one of `.github/`, the repository root, or `docs/`, either as a
directory of markdown files (ISSUE_TEMPLATE/*.md) or as a single
ISSUE_TEMPLATE.md file. Directory and file names match case-insensitively.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import frontmatter
import yaml

logger = logging.getLogger(__name__)

ISSUE_TEMPLATE = "ISSUE_TEMPLATE"


@dataclass(frozen=True)
class IssueTemplate:
    """A template file with its display name and body."""

    path: Path
    name: str
    body: str


def find_templates(root_dir: Path, name: str = ISSUE_TEMPLATE) -> list[Path]:
    """Find template files under a repository root.

    Args:
        root_dir: Repository root directory
        name: Template kind, e.g. "ISSUE_TEMPLATE"

    Returns:
        Sorted template paths from the first matching location. Empty when none
        exist or the directories cannot be read.
    """
    try:
        return _find_templates(root_dir, name)
    except OSError as e:
        logger.debug("Template discovery failed under %s: %s", root_dir, e)
        return []


def _find_templates(root_dir: Path, name: str) -> list[Path]:
    wanted_dir = name.lower()
    wanted_file = f"{name.lower()}.md"

    for candidate in (root_dir / ".github", root_dir, root_dir / "docs"):
        if not candidate.is_dir():
            continue

        for entry in sorted(candidate.iterdir()):
            if entry.is_dir() and entry.name.lower() == wanted_dir:
                templates = sorted(
                    child
                    for child in entry.iterdir()
                    if child.is_file() and child.suffix.lower() == ".md"
                )
                if templates:
                    return templates

        for entry in sorted(candidate.iterdir()):
            if entry.is_file() and entry.name.lower() == wanted_file:
                return [entry]

    return []


def load_template(path: Path) -> IssueTemplate:
    """Read a template, separating YAML front matter from the body.

    The display name comes from the front matter `name:` key, falling back to the
    file stem. Malformed front matter leaves the file content as the body.
    """
    content = path.read_text(encoding="utf-8")
    try:
        post = frontmatter.loads(content)
    except yaml.YAMLError:
        return IssueTemplate(path=path, name=path.stem, body=content)

    template_name = post.metadata.get("name")
    if not isinstance(template_name, str) or not template_name.strip():
        template_name = path.stem
    return IssueTemplate(path=path, name=template_name.strip(), body=post.content)


def load_templates(paths: list[Path]) -> list[IssueTemplate]:
    """Load every readable template; unreadable or non-UTF-8 files are skipped."""
    templates: list[IssueTemplate] = []
    for path in paths:
        try:
            templates.append(load_template(path))
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Skipping template %s: %s", path, e)
    return templates
