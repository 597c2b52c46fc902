"""
Font configuration used when projecting pages into slides.
"""
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional

from .models import Font, Heading, TextLeaf

H1_DEFAULT = Font(size=36, bold=True)
H2_DEFAULT = Font(size=28, bold=True)
H3_DEFAULT = Font(size=24, bold=True)
NORMAL_DEFAULT = Font(size=18, bold=False)
PER_LEVEL_DEFAULT = 4


@dataclass(frozen=True)
class FontConfig:
    """
    Fonts per heading level and for normal text, plus the point size removed
    for every level of list nesting.

    Build customised configurations with :meth:`builder`::

        config = FontConfig.builder().h1(Font(100, False)).per_level(10).build()
    """
    h1: Font = field(default=H1_DEFAULT)
    h2: Font = field(default=H2_DEFAULT)
    h3: Font = field(default=H3_DEFAULT)
    normal: Font = field(default=NORMAL_DEFAULT)
    per_level: int = PER_LEVEL_DEFAULT

    @classmethod
    def builder(cls) -> "FontConfigBuilder":
        return FontConfigBuilder(cls())

    def text_font(self, leaf: TextLeaf) -> Font:
        """Font for a classified line."""
        if isinstance(leaf, Heading):
            return {1: self.h1, 2: self.h2, 3: self.h3}[leaf.level]
        return self.normal

    def list_font(self, leaf: TextLeaf, depth: int) -> Font:
        """
        Font for a list entry nested *depth* levels deep (roots are depth 0).

        The size is not clamped and may reach zero or below.
        """
        font = self.text_font(leaf)
        return replace(font, size=font.size - depth * self.per_level)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "h1": self.h1.to_dict(),
            "h2": self.h2.to_dict(),
            "h3": self.h3.to_dict(),
            "normal": self.normal.to_dict(),
            "per_level": self.per_level,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FontConfig":
        """Build a config from a mapping; missing keys keep their defaults."""
        builder = cls.builder()
        for name in ("h1", "h2", "h3", "normal"):
            if name in data:
                builder = getattr(builder, name)(Font.from_dict(data[name]))
        if "per_level" in data:
            builder = builder.per_level(int(data["per_level"]))
        return builder.build()


class FontConfigBuilder:
    """
    Chainable overrides on top of a base :class:`FontConfig`.

    Builders are immutable: every setter returns a new builder, so one
    builder can be reused as the base of several configurations.
    """

    def __init__(self, base: Optional[FontConfig] = None):
        self._config = base if base is not None else FontConfig()

    def _with(self, **changes) -> "FontConfigBuilder":
        return FontConfigBuilder(replace(self._config, **changes))

    def h1(self, font: Font) -> "FontConfigBuilder":
        return self._with(h1=font)

    def h2(self, font: Font) -> "FontConfigBuilder":
        return self._with(h2=font)

    def h3(self, font: Font) -> "FontConfigBuilder":
        return self._with(h3=font)

    def normal(self, font: Font) -> "FontConfigBuilder":
        return self._with(normal=font)

    def per_level(self, per_level: int) -> "FontConfigBuilder":
        return self._with(per_level=per_level)

    def build(self) -> FontConfig:
        return self._config
