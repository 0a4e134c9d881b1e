# welcome_art/art_io/templates.py
# Template Registry: discovery across user & system roots, metadata extraction & validation

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Optional

from ..config.layers import ShadowedLookup
from ..config.settings import Scope
from ..core.exceptions import RenderError, TemplateNotFoundError
from ..core.verbose import vlog, vlog_file_read, vlog_validation, warn
from .generics import format_size
from .render import UNKNOWN, FigletRenderer, Renderer

TEMPLATE_SUFFIX = ".art"

# reserved marker lines, matched at the very start of a line
METADATA_FIELDS = ("Title", "Description", "Author", "Version", "Font", "Alignment")

VALID_ALIGNMENTS = frozenset({"left", "center", "right"})

PREVIEW_SAMPLE = "Welcome"
PREVIEW_PLACEHOLDER = "(Preview not available)"


# art template loaded from a `<name>.art` file
@dataclass
class Template:
    name: str
    path: Path
    title: str = UNKNOWN
    description: str = UNKNOWN
    author: str = UNKNOWN
    version: str = UNKNOWN
    font: str = UNKNOWN
    alignment: str = UNKNOWN
    content: str = ""
    size: int = 0
    modified: float = 0.0

    @property
    def size_human(self) -> str:
        return format_size(self.size)


# discovered template plus the root it was found under
class ResolvedTemplate(NamedTuple):
    template: Template
    scope: Scope


# * Extract metadata marker values (first occurrence wins, empty -> unknown)
def parse_metadata(text: str) -> Dict[str, str]:
    found: Dict[str, str] = {}
    for line in text.splitlines():
        for name in METADATA_FIELDS:
            prefix = f"# {name}:"
            if name not in found and line.startswith(prefix):
                value = line[len(prefix) :].strip()
                if value:
                    found[name] = value
    return {name: found.get(name, UNKNOWN) for name in METADATA_FIELDS}


def is_metadata_line(line: str) -> bool:
    return any(line.startswith(f"# {name}:") for name in METADATA_FIELDS)


# * Opaque art body: everything after the leading metadata markers & the blanks below them
def extract_content(text: str) -> str:
    lines = text.splitlines(keepends=True)
    start = 0
    while start < len(lines) and (is_metadata_line(lines[start]) or not lines[start].strip()):
        start += 1
    return "".join(lines[start:])


# * Load a single template file
def load_template(path: Path) -> Template:
    text = path.read_text(encoding="utf-8")
    vlog_file_read(path, len(text))
    meta = parse_metadata(text)
    stat = path.stat()
    return Template(
        name=path.stem,
        path=path,
        title=meta["Title"],
        description=meta["Description"],
        author=meta["Author"],
        version=meta["Version"],
        font=meta["Font"],
        alignment=meta["Alignment"],
        content=extract_content(text),
        size=stat.st_size,
        modified=stat.st_mtime,
    )


# * Structural check; every finding is a non-fatal warning
def validate_template(template: Template) -> List[str]:
    warnings: List[str] = []
    if template.font == UNKNOWN:
        warnings.append(
            f"Template '{template.name}' is missing the Font marker; "
            "the renderer default font will be used"
        )
    if template.alignment == UNKNOWN:
        warnings.append(
            f"Template '{template.name}' is missing the Alignment marker; "
            "the renderer default alignment will be used"
        )
    elif template.alignment.lower() not in VALID_ALIGNMENTS:
        warnings.append(
            f"Template '{template.name}' has unrecognized alignment "
            f"'{template.alignment}' (expected left, center or right)"
        )
    return warnings


# * JSON-ready record for one listed template
def template_record(resolved: ResolvedTemplate) -> Dict[str, Any]:
    template = resolved.template
    return {
        "name": template.name,
        "source": resolved.scope.value,
        "title": template.title,
        "description": template.description,
        "author": template.author,
        "version": template.version,
        "size": template.size_human,
        "modified": int(template.modified),
        "path": str(template.path),
    }


# * Registry over the system & user template roots (user shadows system by name)
class TemplateRegistry:
    def __init__(
        self,
        system_dir: Path,
        user_dir: Path,
        renderer: Optional[Renderer] = None,
    ) -> None:
        self.system_dir = Path(system_dir)
        self.user_dir = Path(user_dir)
        self._renderer = renderer

    @property
    def renderer(self) -> Renderer:
        if self._renderer is None:
            self._renderer = FigletRenderer()
        return self._renderer

    def directory(self, scope: Scope) -> Path:
        return self.user_dir if scope is Scope.USER else self.system_dir

    # all templates physically present in one root, sorted by name
    def scan(self, scope: Scope) -> Dict[str, Template]:
        root = self.directory(scope)
        if not root.is_dir():
            return {}
        templates: Dict[str, Template] = {}
        for path in sorted(root.glob(f"*{TEMPLATE_SUFFIX}")):
            if not path.is_file():
                continue
            try:
                templates[path.stem] = load_template(path)
            except (OSError, UnicodeDecodeError) as e:
                warn(f"Skipping unreadable template {path}: {e}", "LIST")
        return templates

    # * Resolve every name to exactly one template
    def discover(self) -> Dict[str, ResolvedTemplate]:
        lookup = ShadowedLookup.user_over_system(
            self.scan(Scope.SYSTEM), self.scan(Scope.USER)
        )
        resolved = {
            name: ResolvedTemplate(found.value, found.scope)
            for name, found in lookup.resolve_all().items()
        }
        vlog("LIST", f"Discovered {len(resolved)} template(s)")
        return dict(sorted(resolved.items()))

    # merged view, or the raw contents of one root when a scope is given
    def list_entries(self, only_scope: Optional[Scope] = None) -> List[ResolvedTemplate]:
        if only_scope is None:
            return list(self.discover().values())
        return [
            ResolvedTemplate(template, only_scope)
            for template in self.scan(only_scope).values()
        ]

    def get(self, name: str) -> ResolvedTemplate:
        found = self.discover().get(name)
        if found is not None:
            return found
        raise TemplateNotFoundError(
            f"Template not found: {name} (searched {self.user_dir} and {self.system_dir})",
            name,
        )

    def exists(self, name: str) -> bool:
        try:
            self.get(name)
        except TemplateNotFoundError:
            return False
        return True

    def validate(self, template: Template) -> List[str]:
        warnings = validate_template(template)
        vlog_validation(
            f"Template '{template.name}': {len(warnings)} warning(s)", warnings
        )
        return warnings

    # * Render the sample text w/ the template's font & alignment
    def preview(self, name: str) -> str:
        template = self.get(name).template
        try:
            return self.renderer.render(
                PREVIEW_SAMPLE, template.font, template.alignment
            )
        except RenderError as e:
            vlog("RENDER", f"Preview of '{name}' unavailable", str(e))
            return PREVIEW_PLACEHOLDER
