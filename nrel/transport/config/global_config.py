from __future__ import annotations

import logging
from typing import NamedTuple, Dict, Optional, Tuple, Union

from nrel.transport.config.config_builder import ConfigBuilder


class GlobalConfig(NamedTuple):
    """
    settings that control logging and outputs, independent of the scenario
    """

    log_level: int
    narrate: bool
    log_events: bool
    log_stats: bool
    write_outputs: bool
    output_base_directory: str

    @classmethod
    def default_config(cls) -> Dict:
        return {
            "log_level": "INFO",
            "narrate": True,
            "log_events": False,
            "log_stats": True,
            "write_outputs": False,
            "output_base_directory": "output",
        }

    @classmethod
    def required_config(cls) -> Tuple[str, ...]:
        return ()

    @classmethod
    def build(cls, config: Optional[Dict] = None) -> GlobalConfig:
        return ConfigBuilder.build(
            default_config=cls.default_config(),
            required_config=cls.required_config(),
            config_constructor=lambda c: GlobalConfig.from_dict(c),
            config=config,
        )

    @classmethod
    def from_dict(cls, d: Dict) -> GlobalConfig:
        return GlobalConfig(
            log_level=_parse_log_level(d["log_level"]),
            narrate=bool(d["narrate"]),
            log_events=bool(d["log_events"]),
            log_stats=bool(d["log_stats"]),
            write_outputs=bool(d["write_outputs"]),
            output_base_directory=str(d["output_base_directory"]),
        )

    def asdict(self) -> Dict:
        out = self._asdict()
        out["log_level"] = logging.getLevelName(self.log_level)
        return out


def _parse_log_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    parsed = logging.getLevelName(str(level).upper())
    if not isinstance(parsed, int):
        raise NameError(f"log level {level} is not known, must be one of DEBUG, INFO, WARNING, ERROR")
    return parsed
