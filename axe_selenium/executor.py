"""
Script execution in the driver's active browsing context.

Selenium runs scripts in whatever frame the driver is currently switched to,
so these helpers never switch context themselves.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Literal

from selenium.common.exceptions import JavascriptException

if TYPE_CHECKING:
	from selenium.webdriver.remote.webdriver import WebDriver


def execute_script(driver: 'WebDriver', command: str, *args: Any) -> Any:
	"""
	Execute a synchronous JavaScript command in the active context.

	Args:
		driver: WebDriver for the page being scanned
		command: The command to execute
		*args: Additional arguments exposed to the command as ``arguments``

	Returns:
		Whatever the command returned
	"""
	return driver.execute_script(command, *args)


def execute_async_script(driver: 'WebDriver', command: str, *args: Any) -> Any:
	"""
	Execute an asynchronous JavaScript command in the active context.

	The driver appends a completion callback as the last entry of ``arguments``.
	This call blocks until the command invokes it, throws, or the driver's
	script timeout expires.

	Args:
		driver: WebDriver for the page being scanned
		command: The command to execute
		*args: Additional arguments exposed to the command as ``arguments``

	Returns:
		The value the command passed to its completion callback
	"""
	return driver.execute_async_script(command, *args)


def is_script_error(error: BaseException) -> bool:
	"""Whether an error was raised by injected JavaScript rather than by navigation."""
	return isinstance(error, JavascriptException)


class ScriptRunner(ABC):
	"""Runs a script in the active context in one execution mode."""

	mode: ClassVar[Literal['sync', 'async']]
	# Only synchronous injection supports a per-frame callback and skipping the payload
	supports_callback: ClassVar[bool]

	@abstractmethod
	def run(self, driver: 'WebDriver', script: str, *args: Any) -> Any:
		...

	def __repr__(self) -> str:
		return f'{type(self).__name__}()'


class SyncScriptRunner(ScriptRunner):
	mode = 'sync'
	supports_callback = True

	def run(self, driver: 'WebDriver', script: str, *args: Any) -> Any:
		return execute_script(driver, script, *args)


class AsyncScriptRunner(ScriptRunner):
	mode = 'async'
	supports_callback = False

	def run(self, driver: 'WebDriver', script: str, *args: Any) -> Any:
		return execute_async_script(driver, script, *args)
