from __future__ import annotations

from typing import NamedTuple, Dict, Optional, Tuple

from nrel.transport.config.config_builder import ConfigBuilder


class Sim(NamedTuple):
    sim_name: str

    @classmethod
    def default_config(cls) -> Dict:
        return {}

    @classmethod
    def required_config(cls) -> Tuple[str, ...]:
        return ("sim_name",)

    @classmethod
    def build(cls, config: Optional[Dict] = None) -> Sim:
        return ConfigBuilder.build(
            default_config=cls.default_config(),
            required_config=cls.required_config(),
            config_constructor=lambda c: Sim.from_dict(c),
            config=config,
        )

    @classmethod
    def from_dict(cls, d: Dict) -> Sim:
        return Sim(sim_name=str(d["sim_name"]))

    def asdict(self) -> Dict:
        return self._asdict()
