"""Render pipeline: profile + theme -> output tree."""

from __future__ import annotations

from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader, TemplateError, TemplateNotFound, select_autoescape

from ..errors import RenderError
from ..icons import IconTable
from ..logging import get_logger
from ..models import OutputTree, Profile, ThemeManifest
from .assets import copy_file, copy_tree, is_local_reference
from .context import RenderContext, build_context

PAGE_NAME = "index.html"
# Theme subtrees mirrored verbatim into the output root.
THEME_SUBTREES = ("styles", "scripts", "assets")
LEGACY_STYLESHEET = "styles.css"


class Generator:
    """Renders a profile against a theme and materializes the output tree."""

    def __init__(self, icons: IconTable) -> None:
        self.icons = icons
        self.logger = get_logger("generator")

    def generate(
        self,
        profile: Profile,
        theme: ThemeManifest,
        output_root: Path,
        *,
        assets_dir: Path | None = None,
    ) -> OutputTree:
        output_root.mkdir(parents=True, exist_ok=True)

        context = build_context(profile, theme, self.icons)
        html = self.render(theme, context)

        page = output_root / PAGE_NAME
        page.write_text(html, encoding="utf-8")
        self.logger.debug("Wrote %s (%d bytes)", page, len(html))

        tree = OutputTree(root=output_root, page=page)
        tree.copied.extend(self._copy_theme_assets(theme, output_root))
        if assets_dir is not None:
            tree.copied.extend(self._copy_user_assets(profile, assets_dir, output_root))
        self.logger.debug("Copied %d asset files", len(tree.copied))
        return tree

    def render(self, theme: ThemeManifest, context: RenderContext) -> str:
        """Render the theme template fully in memory."""
        env = self._create_env(theme.root)
        try:
            template = env.get_template(theme.template)
            return template.render(**context.as_template_vars())
        except TemplateNotFound as exc:
            raise RenderError(f"template {theme.template!r} not found in theme {theme.name}") from exc
        except TemplateError as exc:
            location = f" (line {exc.lineno})" if getattr(exc, "lineno", None) else ""
            raise RenderError(f"failed to render {theme.template}{location}: {exc}") from exc
        except (ArithmeticError, AttributeError, LookupError, TypeError, ValueError) as exc:
            raise RenderError(f"failed to render {theme.template}: {exc}") from exc

    @staticmethod
    def _create_env(theme_root: Path) -> Environment:
        return Environment(
            loader=FileSystemLoader(str(theme_root)),
            autoescape=select_autoescape(["html", "htm", "xml"]),
            keep_trailing_newline=True,
        )

    def _copy_theme_assets(self, theme: ThemeManifest, output_root: Path) -> List[Path]:
        copied: List[Path] = []
        for name in THEME_SUBTREES:
            source = theme.root / name
            if source.is_dir():
                copied.extend(copy_tree(source, output_root / name))

        legacy_css = theme.root / LEGACY_STYLESHEET
        if legacy_css.is_file():
            copied.append(copy_file(legacy_css, output_root / LEGACY_STYLESHEET))

        for script in sorted(theme.root.glob("*.js")):
            if script.is_file():
                copied.append(copy_file(script, output_root / script.name))

        # Declared files living outside the mirrored subtrees.
        for declared in (*theme.styles, *theme.scripts):
            relative = Path(declared)
            if relative.is_absolute() or not is_local_reference(declared):
                continue
            if relative.parts and relative.parts[0] in THEME_SUBTREES:
                continue
            source = theme.root / relative
            target = output_root / relative
            if not _is_within(target, output_root):
                self.logger.warning("Theme asset %s escapes the output directory; not copied", declared)
                continue
            if source.is_file() and target not in copied:
                copied.append(copy_file(source, target))
        return copied

    def _copy_user_assets(self, profile: Profile, assets_dir: Path, output_root: Path) -> List[Path]:
        copied: List[Path] = []
        if is_local_reference(profile.avatar):
            source = assets_dir / profile.avatar
            target = output_root / profile.avatar
            if not _is_within(target, output_root):
                self.logger.warning("Avatar path %s escapes the output directory; not copied", profile.avatar)
            elif source.is_file():
                copied.append(copy_file(source, target))
            else:
                self.logger.debug("Avatar %s not found under %s", profile.avatar, assets_dir)

        if assets_dir.is_dir():
            copied.extend(copy_tree(assets_dir, output_root / "assets"))
        return copied


def _is_within(path: Path, root: Path) -> bool:
    return path.resolve().is_relative_to(root.resolve())


__all__ = ["Generator", "PAGE_NAME"]
