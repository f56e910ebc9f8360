"""
Style registry for emojicolors

Maps tag names (emoji symbols and keywords) to terminal escape codes.
The style table lives in a YAML file; the bundled one is at
data/styles.yaml and a custom one can be chosen with
EMOJICOLORS_STYLES_FILE.

A style table has the shape:

    clear: "\\x1b[0m"
    styles:
      - name: red
        category: color
        code: "\\x1b[31m"
        symbols: ["🔴", "❤"]
        keywords: [red, r]
"""

import yaml
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from ..models.styles import StyleCategory, StyleSpec, name_normalize
from .log import LOG


DEFAULT_STYLES_FILE: Path = Path(__file__).parent.parent / "data" / "styles.yaml"


class StyleTableError(ValueError):
    """Raised when a style table cannot be loaded or fails validation"""
    pass


def styleTable_load(path: Optional[Path] = None) -> Tuple[str, List[StyleSpec]]:
    """
    Load and validate a YAML style table

    Args:
        path: Style table file (defaults to the bundled table)

    Returns:
        Tuple of (clear code, style specs in table order)

    Raises:
        StyleTableError: If the file is missing, unparsable, or a style
                         entry is malformed
    """
    table_path = Path(path) if path is not None else DEFAULT_STYLES_FILE
    LOG(f"Loading style table: {table_path}", level=2)

    if not table_path.exists():
        raise StyleTableError(f"Style table not found: {table_path}")

    try:
        with open(table_path, 'r', encoding='utf-8') as f:
            table: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise StyleTableError(f"Failed to parse {table_path.name}: {e}")

    if not isinstance(table, dict):
        raise StyleTableError(f"Style table {table_path.name} must be a mapping")

    clear = table.get('clear')
    if not isinstance(clear, str) or not clear:
        raise StyleTableError(f"Style table {table_path.name} has no 'clear' code")

    entries = table.get('styles') or []
    if not isinstance(entries, list):
        raise StyleTableError(f"'styles' in {table_path.name} must be a list")

    specs = [styleEntry_parse(entry, index) for index, entry in enumerate(entries)]
    LOG(f"Loaded {len(specs)} styles from {table_path.name}", level=3)
    return clear, specs


def styleEntry_parse(entry: Any, index: int) -> StyleSpec:
    """
    Build a StyleSpec from one entry of the 'styles' list

    Args:
        entry: Mapping read from YAML
        index: Position in the list (for error messages)

    Raises:
        StyleTableError: On missing name/code or unknown category
    """
    if not isinstance(entry, dict):
        raise StyleTableError(f"Style #{index} must be a mapping")

    name = entry.get('name')
    code = entry.get('code')
    if not name or not isinstance(code, str) or not code:
        raise StyleTableError(f"Style #{index} needs both 'name' and 'code'")

    try:
        category = StyleCategory(entry.get('category', StyleCategory.MODIFIER.value))
    except ValueError:
        raise StyleTableError(f"Style '{name}' has unknown category '{entry.get('category')}'")

    return StyleSpec(
        name=str(name),
        category=category,
        code=code,
        symbols=tuple(str(s) for s in entry.get('symbols') or ()),
        keywords=tuple(str(k) for k in entry.get('keywords') or ()),
    )


class StyleRegistry:
    """
    Registry of terminal styles

    Maps every alias of every style to its StyleSpec. Once constructed the
    lookup table is exposed read-only and never changes, so one registry
    can be shared between threads.
    """

    def __init__(
        self,
        styles_file: Optional[str] = None,
        normalize: Optional[bool] = None,
    ) -> None:
        """
        Initialize the registry from a style table

        Args:
            styles_file: YAML style table (defaults to appsettings.styles_file,
                         then to the bundled table)
            normalize: Strip presentation selectors before lookup (defaults
                       to appsettings.normalize_variants)

        Raises:
            StyleTableError: If the table is invalid or two styles share an alias
        """
        from ..config import appsettings

        if styles_file is None:
            styles_file = appsettings.styles_file
        self.normalize = appsettings.normalize_variants if normalize is None else normalize

        self._specs: Dict[str, StyleSpec] = {}
        self.clear, styles = styleTable_load(Path(styles_file).expanduser() if styles_file else None)
        self.styles: Tuple[StyleSpec, ...] = tuple(styles)
        for spec in self.styles:
            self.register(spec)

        self.specs: Mapping[str, StyleSpec] = MappingProxyType(self._specs)

    def register(self, spec: StyleSpec) -> None:
        """
        Register a style under all of its aliases

        Raises:
            StyleTableError: If an alias already belongs to another style
        """
        for alias in spec.aliases:
            key = self.name_normalize(alias)
            owner = self._specs.get(key)
            if owner is not None and owner.name != spec.name:
                raise StyleTableError(
                    f"Alias '{alias}' of style '{spec.name}' already belongs to '{owner.name}'"
                )
            self._specs[key] = spec

    def name_normalize(self, name: str) -> str:
        """Apply presentation-selector stripping when enabled"""
        return name_normalize(name) if self.normalize else name

    def get(self, name: str) -> Optional[str]:
        """
        Get the escape code for a tag name

        Args:
            name: Tag name as written between the brackets

        Returns:
            Style code, or None if the name is not a known alias
        """
        spec = self.spec_get(name)
        return spec.code if spec else None

    def spec_get(self, name: str) -> Optional[StyleSpec]:
        """Get full style specification by tag name"""
        return self._specs.get(self.name_normalize(name))

    def styles_listByCategory(self, category: StyleCategory) -> List[StyleSpec]:
        """Get all styles in a category, in table order"""
        return [spec for spec in self.styles if spec.category == category]

    def emoji_toAnsi(self) -> Mapping[str, str]:
        """
        Map each style's primary symbol to its code

        Lookups go through name_normalize(), so "⬛" and "⬛\\ufe0f" find
        the same code.

        Returns:
            Read-only mapping, e.g. {"🔴": "\\x1b[31m", "🟥": "\\x1b[1;31m", ...}
        """
        return SymbolCodes(self)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.spec_get(name) is not None

    def __len__(self) -> int:
        return len(self.styles)

    def __repr__(self) -> str:
        return f"StyleRegistry(styles={len(self.styles)}, aliases={len(self._specs)})"


class SymbolCodes(Mapping[str, str]):
    """
    Read-only primary symbol → code mapping

    Iterates the primary symbols exactly as the style table writes them;
    lookups normalize the key the same way StyleRegistry.get() does.
    """

    def __init__(self, registry: StyleRegistry) -> None:
        self._registry = registry
        self._symbols: List[str] = [spec.primary for spec in registry.styles]
        self._codes: Dict[str, str] = {
            registry.name_normalize(spec.primary): spec.code for spec in registry.styles
        }

    def __getitem__(self, symbol: str) -> str:
        if not isinstance(symbol, str):
            raise KeyError(symbol)
        return self._codes[self._registry.name_normalize(symbol)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"SymbolCodes({dict(self)!r})"


@lru_cache(maxsize=None)
def registry_default() -> StyleRegistry:
    """
    Shared registry built from the configured style table

    Built on first use and reused for the rest of the process.
    """
    return StyleRegistry()
