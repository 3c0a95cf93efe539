"""Pipeline that inserts the badge block into a project's README."""

from __future__ import annotations

import difflib
from pathlib import Path

from .config import CONFIG_FILENAME, BadgeupConfig, load_config
from .errors import MissingManifest, MissingReadme, ReadError, UnsupportedProvider, WriteError
from .locator import HeadingLocator
from .logging import get_logger
from .manifest import ManifestReader
from .models import UpdateOutcome
from .postproc.badges import BadgeComposer


class Orchestrator:
    """Runs read manifest -> read README -> locate -> compose -> splice -> write."""

    def __init__(
        self,
        locator: HeadingLocator | None = None,
        composer: BadgeComposer | None = None,
    ) -> None:
        self.locator = locator or HeadingLocator()
        self._composer = composer
        self.logger = get_logger("orchestrator")

    def run(self, path: str | Path = ".", *, dry_run: bool = False) -> UpdateOutcome:
        """Insert badges under the first heading of the project's README.

        Nothing is written unless every step succeeds. With ``dry_run`` the
        README is left untouched and only the diff is returned.
        """
        project_path = Path(path).expanduser().resolve()
        config = load_config(project_path / CONFIG_FILENAME)
        self.logger.info("Starting badge run for %s", project_path)

        manifest_path, readme_path = self._check_layout(config)

        reader = ManifestReader(require_repository=config.require_repository)
        manifest = reader.read(manifest_path)
        provider = reader.hosting_provider(manifest)

        original = self._read_readme(readme_path)
        offset = self.locator.locate(original, source=str(readme_path))

        composer = self._composer or BadgeComposer(badges=config.badges)
        try:
            block = composer.compose(manifest.name, provider)
        except UnsupportedProvider as exc:
            raise UnsupportedProvider(f"{exc} (repository field of {manifest_path})") from exc
        updated = composer.insert(original, offset, block)
        diff_text = self._render_diff(original, updated, readme_path.name)

        if dry_run:
            self.logger.info("Dry-run completed; README changes not written")
            return UpdateOutcome(path=readme_path, diff=diff_text, dry_run=True)

        try:
            readme_path.write_text(updated, encoding="utf-8", newline="")
        except OSError as exc:
            raise WriteError(f"Failed to write to README at {readme_path}: {exc}") from exc
        self.logger.info("README updated at %s", readme_path)
        return UpdateOutcome(path=readme_path, diff=diff_text, dry_run=False)

    @staticmethod
    def _check_layout(config: BadgeupConfig) -> tuple[Path, Path]:
        manifest_path = config.manifest_path
        readme_path = config.readme_path
        if not manifest_path.exists():
            raise MissingManifest(
                "A Rust crate expected.\n"
                f"Manifest [{config.manifest}] expected at {manifest_path}"
            )
        if not readme_path.exists():
            raise MissingReadme(f"A {config.readme} expected at {readme_path}")
        return manifest_path, readme_path

    @staticmethod
    def _read_readme(readme_path: Path) -> str:
        try:
            with readme_path.open(encoding="utf-8", newline="") as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(f"Failed to read README at {readme_path}: {exc}") from exc

    @staticmethod
    def _render_diff(original: str, updated: str, name: str) -> str:
        diff = difflib.unified_diff(
            original.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{name} (original)",
            tofile=f"{name} (updated)",
        )
        return "".join(diff)


__all__ = ["Orchestrator"]
