"""
Sources for the axe-core script text.

The injector only needs a string. Providers load it from wherever it lives
(a literal, a downloaded ``axe.min.js``, a file shipped inside a package) and
report failures as AxeScriptLoadError before any frame switching starts.
"""

import logging
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING, Union

from axe_selenium.exceptions import AxeScriptLoadError

if TYPE_CHECKING:
	from axe_selenium.config import InjectionOptions

logger = logging.getLogger(__name__)

UTF8_BOM = '\ufeff'


class AxeScriptProvider(ABC):
	"""Supplies the axe script source. The text is loaded once and cached."""

	def __init__(self) -> None:
		self._script: str | None = None

	def get_script(self) -> str:
		"""
		Get the axe script source.

		Returns:
			The script text with any UTF-8 BOM and surrounding whitespace removed

		Raises:
			AxeScriptLoadError: If the script cannot be loaded or is empty
		"""
		if self._script is None:
			raw_script = self._load()
			script = raw_script.strip()
			if script.startswith(UTF8_BOM):
				script = script[1:].lstrip()
			if not script:
				raise AxeScriptLoadError(f'{self!r} returned an empty axe script')
			logger.debug(f'axe script loaded from {self!r}, length: {len(script)} chars')
			self._script = script
		return self._script

	@abstractmethod
	def _load(self) -> str:
		"""Read the raw script text."""


class StringAxeScriptProvider(AxeScriptProvider):
	"""Serves script text that is already in memory."""

	def __init__(self, script: str):
		super().__init__()
		self.script = script

	def _load(self) -> str:
		return self.script

	def __repr__(self) -> str:
		return f'StringAxeScriptProvider(<{len(self.script)} chars>)'


class FileAxeScriptProvider(AxeScriptProvider):
	"""Reads the script from a file on disk, such as a downloaded axe.min.js."""

	def __init__(self, path: str | Path, encoding: str = 'utf-8'):
		super().__init__()
		self.path = Path(path)
		self.encoding = encoding

	def _load(self) -> str:
		try:
			return self.path.read_text(encoding=self.encoding)
		except (OSError, UnicodeDecodeError) as e:
			raise AxeScriptLoadError(f'Could not read axe script from {self.path}: {e}') from e

	def __repr__(self) -> str:
		return f'FileAxeScriptProvider({str(self.path)!r})'


class PackageResourceAxeScriptProvider(AxeScriptProvider):
	"""
	Reads the script from a resource bundled inside an installed package.

	Usage:
		provider = PackageResourceAxeScriptProvider('my_tests.assets', 'axe', 'axe.min.js')
	"""

	def __init__(self, package: str, *resource_path: str, encoding: str = 'utf-8'):
		super().__init__()
		if not resource_path:
			raise ValueError('A resource path inside the package is required')
		self.package = package
		self.resource_path = resource_path
		self.encoding = encoding

	def _load(self) -> str:
		try:
			return resources.files(self.package).joinpath(*self.resource_path).read_text(encoding=self.encoding)
		except (ModuleNotFoundError, OSError, UnicodeDecodeError) as e:
			raise AxeScriptLoadError(
				f'Could not read axe script {"/".join(self.resource_path)} from package {self.package}: {e}'
			) from e

	def __repr__(self) -> str:
		return f'PackageResourceAxeScriptProvider({self.package!r}, {"/".join(self.resource_path)!r})'


ScriptSource = Union[str, AxeScriptProvider]


def resolve_script(script: ScriptSource) -> str:
	"""Return the script text, loading it through the provider if one was given."""
	if isinstance(script, AxeScriptProvider):
		return script.get_script()
	return script


def provider_from_config(options: 'InjectionOptions') -> FileAxeScriptProvider:
	"""
	Build a file provider from the configured axe script path.

	Raises:
		AxeScriptLoadError: If no path is configured
	"""
	if options.axe_script_path is None:
		raise AxeScriptLoadError(
			'No axe script path configured. Set AXE_SCRIPT_PATH or pass axe_script_path.'
		)
	return FileAxeScriptProvider(options.axe_script_path)
