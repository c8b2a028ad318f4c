"""Config show API command.

CLI: vimania config show
"""

from collections.abc import Iterator

from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult
from .VimaniaConfig import VimaniaConfig


def cmd_show() -> StageResult:
    """Show the effective configuration (defaults when no file exists)."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = VimaniaConfig.get_config_path()

        yield (0.3, "Loading configuration...")
        try:
            config = VimaniaConfig.load()
        except ValueError as e:
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                warnings=[],
                config_path=str(config_path),
                exists=config_path.exists(),
                content={},
            ).model_dump(mode="python")
            result_obj.result = f"Failed to load configuration: {e}"
            result_obj.success = False
            yield (1.0, "Complete")
            return

        warnings = [] if config_path.exists() else [f"No config file at {config_path}, using defaults"]
        result_obj.output = ConfigShowOutput(
            errors=[],
            warnings=warnings,
            config_path=str(config_path),
            exists=config_path.exists(),
            content=config.to_dict(),
        ).model_dump(mode="python")
        result_obj.result = "Configuration loaded"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Showing configuration...",
        progress_callback=do_work,
    )
