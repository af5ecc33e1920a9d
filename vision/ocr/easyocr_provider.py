"""EasyOCR backend: a helper script writes recognized lines to a file."""

from __future__ import annotations

import tempfile
from pathlib import Path

from core.settings import EasyOCRSettings
from executor.command_executor import CommandRunner, find_executable
from executor.script_provisioner import ensure_script_installed
from vision.base_vision import BaseOCRBackend

# Usage: <script> IMAGE OUTPUT. One line per detected text region.
DEFAULT_SCRIPT_TEMPLATE = '''#!/usr/bin/env python3
"""Write EasyOCR results for IMAGE to OUTPUT, one text region per line."""

import os
import sys
import warnings


def main() -> int:
    if len(sys.argv) != 3:
        print("usage: {name} IMAGE OUTPUT", file=sys.stderr)
        return 2
    image_path, output_path = sys.argv[1], sys.argv[2]

    warnings.filterwarnings("ignore")
    devnull = os.open(os.devnull, os.O_WRONLY)
    saved_stderr = os.dup(2)
    os.dup2(devnull, 2)
    try:
        import easyocr

        reader = easyocr.Reader({languages!r}, verbose=False)
        lines = reader.readtext(image_path, detail=0)
    finally:
        os.dup2(saved_stderr, 2)
        os.close(devnull)

    with open(output_path, "w", encoding="utf-8") as fh:
        for line in lines:
            fh.write(line + "\\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
'''


def render_default_script(settings: EasyOCRSettings) -> str:
    return DEFAULT_SCRIPT_TEMPLATE.format(name=settings.command, languages=list(settings.languages))


class EasyOCRProvider(BaseOCRBackend):
    """Resolves or provisions the helper command, then reads its output file."""

    name = "easyocr"

    def __init__(
        self,
        settings: EasyOCRSettings | None = None,
        runner: CommandRunner | None = None,
        fail_on_error: bool = True,
    ) -> None:
        super().__init__(runner=runner, fail_on_error=fail_on_error)
        self.settings = settings or EasyOCRSettings()

    def is_available(self) -> bool:
        if self.settings.environment and find_executable(self.settings.environment_manager) is None:
            return False
        return self._existing_command() is not None

    def _existing_command(self) -> Path | None:
        found = find_executable(self.settings.command)
        if found is not None:
            return found
        installed = self.settings.script_dir / self.settings.command
        return installed if installed.exists() else None

    def resolve_command(self) -> Path:
        """Return the helper command path, provisioning the default script if absent."""
        found = find_executable(self.settings.command)
        if found is not None:
            return found
        return ensure_script_installed(
            self.settings.command,
            self.settings.script_dir,
            render_default_script(self.settings),
        )

    def build_command(self, command: Path, image_path: Path, output_path: Path) -> list[str]:
        argv = [str(command), str(image_path), str(output_path)]
        if self.settings.environment:
            return [self.settings.environment_manager, "run", "-n", self.settings.environment, *argv]
        return argv

    def invoke(self, image_path: Path) -> str:
        command = self.resolve_command()
        with tempfile.TemporaryDirectory(prefix="ocr-drawer-") as tmp_dir:
            output_path = Path(tmp_dir) / "result.txt"
            self._execute(self.build_command(command, image_path, output_path))
            if not output_path.exists():
                return ""
            return output_path.read_text(encoding="utf-8")
