"""Config init API command.

CLI: vimania config init [--force]
"""

from collections.abc import Iterator

from .._output_schemas.config import ConfigInitOutput
from ..StageResult import StageResult
from .VimaniaConfig import VimaniaConfig


def cmd_init(force: bool = False) -> StageResult:
    """Write the default configuration, keeping an existing file unless forced."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = VimaniaConfig.get_config_path()

        if config_path.exists() and not force:
            result_obj.output = ConfigInitOutput(
                errors=[f"Config file already exists: {config_path} (use --force to overwrite)"],
                warnings=[],
                config_path=str(config_path),
                written=False,
            ).model_dump(mode="python")
            result_obj.result = f"Config file already exists: {config_path}"
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.5, "Writing default configuration...")
        try:
            VimaniaConfig().save(config_path)
        except RuntimeError as e:
            result_obj.output = ConfigInitOutput(
                errors=[str(e)], warnings=[], config_path=str(config_path), written=False
            ).model_dump(mode="python")
            result_obj.result = str(e)
            result_obj.success = False
            yield (1.0, "Complete")
            return

        result_obj.output = ConfigInitOutput(
            errors=[], warnings=[], config_path=str(config_path), written=True
        ).model_dump(mode="python")
        result_obj.result = f"Wrote {config_path}"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Initializing configuration...",
        progress_callback=do_work,
    )
