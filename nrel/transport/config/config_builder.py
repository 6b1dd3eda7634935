from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Tuple, TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")


class ConfigBuilder:
    @classmethod
    def build(
        cls,
        default_config: Dict,
        required_config: Tuple[str, ...],
        config_constructor: Callable[[Dict], T],
        config: Optional[Dict] = None,
    ) -> T:
        """
        merges a config section over its defaults, checks that every required key
        has a value and hands the result to the section's constructor.
        keys the section does not know about are logged and left for the constructor to ignore.

        :param default_config: the section's default values
        :param required_config: the keys which must have a value after merging with the defaults
        :param config_constructor: builds the section's config object from the merged dict
        :param config: the values to load for this section, if any
        :return: the constructed config
        :raises: AttributeError naming every required key that is missing
        """
        merged = {**default_config, **(config or {})}

        missing = [key for key in required_config if merged.get(key) is None]
        if missing:
            raise AttributeError(f"expected required config key(s) {', '.join(missing)} not found")

        known = set(default_config).union(required_config)
        unknown = sorted(k for k in merged if k not in known)
        if known and unknown:
            log.warning(f"ignoring unknown config key(s): {', '.join(map(str, unknown))}")

        return config_constructor(merged)
