"""
asyncio access to axe injection.

Selenium calls block, so AxeSeleniumSession runs each injection on the event
loop's default executor. Exclusion lives in the AxeInjector's lock, which the
worker thread holds until its traversal ends: cancelling an awaiting caller
(for example with asyncio.wait_for around a hung async payload) stops the
wait, not the traversal, and the next injection on the session still queues
behind it instead of racing on the driver's current frame.
"""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from axe_selenium.config import InjectionOptions
from axe_selenium.injector import AxeInjector, FrameCallback
from axe_selenium.providers import ScriptSource

if TYPE_CHECKING:
	from selenium.webdriver.remote.webdriver import WebDriver


class AxeSeleniumSession:
	"""
	Wraps an existing WebDriver for asyncio callers.

	The session does not own the browser: it never starts or quits the driver.

	Usage:
		session = await AxeSeleniumSession.from_local_driver(driver)
		await session.inject(FileAxeScriptProvider('axe.min.js'))
	"""

	def __init__(
		self,
		driver: 'WebDriver',
		logger: logging.Logger | None = None,
		options: InjectionOptions | None = None,
	):
		self.driver = driver
		self.logger = logger or logging.getLogger(__name__)
		self.injector = AxeInjector(driver, logger=self.logger, options=options)

	@classmethod
	async def from_local_driver(
		cls,
		driver: 'WebDriver',
		logger: logging.Logger | None = None,
		options: InjectionOptions | None = None,
	) -> 'AxeSeleniumSession':
		"""
		Create an AxeSeleniumSession from an existing WebDriver.

		Args:
			driver: Existing Selenium WebDriver
			logger: Optional logger
			options: Default injection options

		Returns:
			AxeSeleniumSession wrapping the driver
		"""
		return cls(driver, logger=logger, options=options)

	async def inject(
		self,
		script: ScriptSource,
		disable_iframe_testing: bool | None = None,
		inject_cb: FrameCallback | None = None,
		do_not_inject_axe: bool | None = None,
	) -> Any:
		"""Synchronous-script injection into the page and its frames, run off the event loop."""
		return await asyncio.get_running_loop().run_in_executor(
			None,
			lambda: self.injector.inject(
				script,
				disable_iframe_testing=disable_iframe_testing,
				inject_cb=inject_cb,
				do_not_inject_axe=do_not_inject_axe,
			)
		)

	async def inject_async(self, script: ScriptSource, disable_iframe_testing: bool | None = None) -> Any:
		"""Asynchronous-script injection into the page and its frames, run off the event loop."""
		return await asyncio.get_running_loop().run_in_executor(
			None,
			lambda: self.injector.inject_async(script, disable_iframe_testing=disable_iframe_testing)
		)

	@property
	def is_busy(self) -> bool:
		"""Whether an injection is still running on this session, even one whose caller stopped waiting."""
		return self.injector.is_busy
