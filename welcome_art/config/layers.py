# welcome_art/config/layers.py
# Two-tier "user shadows system" precedence, shared by config layers & template search roots

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import (
    Dict,
    Generic,
    Hashable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

from ..core.exceptions import ConfigNotFoundError
from ..core.verbose import vlog, warn
from .settings import FALSE_LITERALS, TRUE_LITERALS, Scope
from .store import load_document

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


# value together w/ the scope that supplied it
@dataclass(frozen=True)
class Resolved(Generic[V]):
    value: V
    scope: Scope


# * Precedence-ordered lookup over named resources; the first layer holding a key wins
class ShadowedLookup(Generic[K, V]):
    def __init__(self, layers: Sequence[Tuple[Scope, Mapping[K, V]]]):
        # layers are given highest precedence first
        self._layers = [(scope, dict(mapping)) for scope, mapping in layers]

    @classmethod
    def user_over_system(
        cls, system: Mapping[K, V], user: Mapping[K, V]
    ) -> "ShadowedLookup[K, V]":
        return cls([(Scope.USER, user), (Scope.SYSTEM, system)])

    def lookup(self, key: K) -> Optional[Resolved[V]]:
        for scope, mapping in self._layers:
            if key in mapping:
                return Resolved(mapping[key], scope)
        return None

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        found = self.lookup(key)
        return found.value if found is not None else default

    def scope_of(self, key: K) -> Optional[Scope]:
        found = self.lookup(key)
        return found.scope if found is not None else None

    # keys in first-seen order, lowest-precedence layer first
    def keys(self) -> List[K]:
        ordered: Dict[K, None] = {}
        for _, mapping in reversed(self._layers):
            for key in mapping:
                ordered.setdefault(key, None)
        return list(ordered)

    def resolve_all(self) -> Dict[K, Resolved[V]]:
        resolved: Dict[K, Resolved[V]] = {}
        for key in self.keys():
            found = self.lookup(key)
            if found is not None:
                resolved[key] = found
        return resolved

    def layer(self, scope: Scope) -> Dict[K, V]:
        for layer_scope, mapping in self._layers:
            if layer_scope is scope:
                return dict(mapping)
        return {}

    def __contains__(self, key: object) -> bool:
        return any(key in mapping for _, mapping in self._layers)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self.keys())


# * Read-only merged view of the system & user configuration layers
class EffectiveConfig:
    def __init__(
        self,
        lookup: ShadowedLookup[Tuple[str, str], str],
        warnings: Sequence[str] = (),
    ) -> None:
        self._lookup = lookup
        self.warnings: Tuple[str, ...] = tuple(warnings)

    def get(self, section: str, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._lookup.get((section, key), default)

    def get_bool(self, section: str, key: str, default: bool = False) -> bool:
        raw = self.get(section, key)
        if raw is None:
            return default
        literal = raw.strip().lower()
        if literal in TRUE_LITERALS:
            return True
        if literal in FALSE_LITERALS:
            return False
        return default

    def source(self, section: str, key: str) -> Optional[Scope]:
        return self._lookup.scope_of((section, key))

    def layer_value(self, scope: Scope, section: str, key: str) -> Optional[str]:
        return self._lookup.layer(scope).get((section, key))

    def sections(self) -> List[str]:
        names: List[str] = []
        for section, _ in self._lookup.keys():
            if section not in names:
                names.append(section)
        return names

    def items(self, section: str) -> Dict[str, str]:
        return {
            key: resolved.value
            for (sec, key), resolved in self._lookup.resolve_all().items()
            if sec == section
        }

    def as_dict(self) -> Dict[str, Dict[str, str]]:
        return {section: self.items(section) for section in self.sections()}

    def __contains__(self, item: object) -> bool:
        return item in self._lookup


# load one layer; every read failure degrades the layer to empty w/ a warning
def _load_layer(
    path: Optional[Path], scope: Scope, warnings: List[str]
) -> Dict[Tuple[str, str], str]:
    if path is None:
        return {}
    try:
        doc = load_document(path)
    except ConfigNotFoundError:
        vlog("CONFIG", f"No {scope} configuration at {path}; layer is empty")
        return {}
    except (OSError, UnicodeDecodeError) as e:
        warnings.append(f"Could not read {scope} configuration {path}: {e}")
        return {}

    errors = doc.errors
    if errors:
        warnings.append(
            f"{scope.value.capitalize()} configuration {path} has {len(errors)} "
            f"invalid line(s) (first at line {errors[0].line_number}); ignoring them"
        )
    warnings.extend(f"{path}: {w}" for w in doc.warnings)
    return doc.as_mapping()


# * Merge system (base) & user (overlay) config files into one effective view
def resolve_effective_config(
    system_path: Optional[Path],
    user_path: Optional[Path],
    surface_warnings: bool = True,
) -> EffectiveConfig:
    warnings: List[str] = []
    base = _load_layer(system_path, Scope.SYSTEM, warnings)
    overlay = _load_layer(user_path, Scope.USER, warnings)

    if surface_warnings:
        for message in warnings:
            warn(message, "CONFIG")

    return EffectiveConfig(ShadowedLookup.user_over_system(base, overlay), warnings)
