"""
Injection options and their environment defaults.

Environment variables (a ``.env`` file in the working directory is honoured):

- AXE_DISABLE_IFRAME_TESTING: only inject into the top-level document
- AXE_DO_NOT_INJECT: switch into frames and run callbacks without injecting
- AXE_SCRIPT_PATH: path to the axe script used by provider_from_config()
"""

import os
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict

ENV_VARS: dict[str, str] = {
	'disable_iframe_testing': 'AXE_DISABLE_IFRAME_TESTING',
	'do_not_inject_axe': 'AXE_DO_NOT_INJECT',
	'axe_script_path': 'AXE_SCRIPT_PATH',
}


class InjectionOptions(BaseModel):
	"""Per-invocation traversal policy."""

	model_config = ConfigDict(frozen=True)

	disable_iframe_testing: bool = False
	do_not_inject_axe: bool = False  # Ignored by asynchronous injection, which always injects
	axe_script_path: Path | None = None

	@classmethod
	def from_env(cls, load_env_file: bool = True, **overrides: Any) -> 'InjectionOptions':
		"""
		Build options from environment variables.

		Args:
			load_env_file: Whether to load a ``.env`` file first
			**overrides: Field values that take precedence over the environment

		Raises:
			pydantic.ValidationError: If an environment value cannot be parsed
		"""
		if load_env_file:
			load_dotenv(find_dotenv(usecwd=True))

		values: dict[str, Any] = {}
		for field_name, env_name in ENV_VARS.items():
			value = os.getenv(env_name)
			if value:
				values[field_name] = value
		values.update(overrides)
		return cls(**values)
