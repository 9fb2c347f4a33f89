"""
Injection of the axe-core script into a page and all of its frames.

axe can only scan a frame from inside that frame's own JavaScript context, so
the script is run once in the top-level document and then once in every
frame and iframe, depth first, by switching the driver into each frame.

Frames that cannot be entered or scanned (detached, hidden, stale, blocked)
are skipped silently. Errors thrown by the injected script itself are never
swallowed: they abort the whole injection and reach the caller unchanged.

Usage:
	from axe_selenium import FileAxeScriptProvider, inject

	inject(driver, FileAxeScriptProvider('axe.min.js'))

	# Run a callback in every context without re-injecting
	inject(driver, script, inject_cb=lambda d: d.execute_script(configure_js), do_not_inject_axe=True)
"""

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from selenium.webdriver.common.by import By

from axe_selenium.config import InjectionOptions
from axe_selenium.executor import AsyncScriptRunner, ScriptRunner, SyncScriptRunner, is_script_error
from axe_selenium.frame_context import FrameContext, entered_frame, switch_to_default
from axe_selenium.providers import ScriptSource, resolve_script

if TYPE_CHECKING:
	from selenium.webdriver.remote.webdriver import WebDriver

# Any frame or iframe in the active document, at any depth, regardless of namespace or case
FRAME_XPATH = ".//*[local-name()='frame' or local-name()='iframe']"

FrameCallback = Callable[['WebDriver'], Any]


def run_injection(
	driver: 'WebDriver',
	script: str,
	runner: ScriptRunner,
	do_not_inject_axe: bool = False,
	inject_cb: FrameCallback | None = None,
) -> Any:
	"""
	Inject into whatever context the driver is currently switched to.

	Returns:
		The script's return value, or None when injection was skipped
	"""
	result = None
	if not do_not_inject_axe:
		result = runner.run(driver, script)
	if inject_cb is not None:
		inject_cb(driver)
	return result


class FrameTraverser:
	"""
	Depth-first walk over the frames of the driver's active context.

	Each discovered frame is entered, injected, searched for its own frames and
	left again before moving to the next sibling.
	"""

	def __init__(
		self,
		driver: 'WebDriver',
		script: str,
		runner: ScriptRunner,
		inject_cb: FrameCallback | None = None,
		do_not_inject_axe: bool = False,
		context: FrameContext | None = None,
		logger: logging.Logger | None = None,
	):
		if not runner.supports_callback and (inject_cb is not None or do_not_inject_axe):
			raise ValueError(f'{runner.mode} injection does not support a frame callback or do_not_inject_axe')

		self.driver = driver
		self.script = script
		self.runner = runner
		self.inject_cb = inject_cb
		self.do_not_inject_axe = do_not_inject_axe
		self.context = context or FrameContext()
		self.logger = logger or logging.getLogger(__name__)

	def traverse(self) -> None:
		"""
		Inject into every frame below the active context.

		Raises:
			JavascriptException: If the injected script errors in any frame
		"""
		frames = self.driver.find_elements(By.XPATH, FRAME_XPATH)
		if frames:
			self.logger.debug(f'Found {len(frames)} frames in {self.context.path}')

		for index, frame in enumerate(frames):
			try:
				with entered_frame(self.driver, frame, self.context, marker=f'index:{index}'):
					run_injection(
						self.driver,
						self.script,
						self.runner,
						do_not_inject_axe=self.do_not_inject_axe,
						inject_cb=self.inject_cb,
					)
					self.traverse()
			except Exception as e:
				# Ignore all errors except those caused by the injected javascript itself
				if is_script_error(e):
					raise


class AxeInjector:
	"""
	Injects the axe script into a driver's page and its frames.

	Options given to a call override the injector's default InjectionOptions.
	Injections through one AxeInjector run one at a time; a second call blocks
	until the first traversal has finished.

	Usage:
		injector = AxeInjector(driver, options=InjectionOptions.from_env())
		injector.inject(FileAxeScriptProvider('axe.min.js'))
	"""

	def __init__(
		self,
		driver: 'WebDriver',
		logger: logging.Logger | None = None,
		options: InjectionOptions | None = None,
	):
		self.driver = driver
		self.logger = logger or logging.getLogger(__name__)
		self.options = options or InjectionOptions()
		self._context = FrameContext()
		self._lock = threading.Lock()

	def inject(
		self,
		script: ScriptSource,
		disable_iframe_testing: bool | None = None,
		inject_cb: FrameCallback | None = None,
		do_not_inject_axe: bool | None = None,
	) -> Any:
		"""
		Synchronously inject into the page and, unless disabled, every frame.

		Args:
			script: The script to inject, or a provider to load it from
			disable_iframe_testing: Only inject into the top-level document
			inject_cb: Called with the driver in every context after injecting
			do_not_inject_axe: Switch contexts and call inject_cb without injecting

		Returns:
			The script's return value in the top-level document

		Raises:
			AxeScriptLoadError: If a provider fails to load the script
			JavascriptException: If the injected script errors in any context
		"""
		if disable_iframe_testing is None:
			disable_iframe_testing = self.options.disable_iframe_testing
		if do_not_inject_axe is None:
			do_not_inject_axe = self.options.do_not_inject_axe

		return self._inject(
			script,
			SyncScriptRunner(),
			disable_iframe_testing=disable_iframe_testing,
			inject_cb=inject_cb,
			do_not_inject_axe=do_not_inject_axe,
		)

	def inject_async(self, script: ScriptSource, disable_iframe_testing: bool | None = None) -> Any:
		"""
		Inject with execute_async_script into the page and, unless disabled, every frame.

		Each context waits for the script to call its completion callback before
		the next frame is entered. Always injects and never calls a frame callback.

		Returns:
			The value the script completed with in the top-level document

		Raises:
			AxeScriptLoadError: If a provider fails to load the script
			JavascriptException: If the injected script errors in any context
		"""
		if disable_iframe_testing is None:
			disable_iframe_testing = self.options.disable_iframe_testing

		return self._inject(script, AsyncScriptRunner(), disable_iframe_testing=disable_iframe_testing)

	def _inject(
		self,
		script: ScriptSource,
		runner: ScriptRunner,
		disable_iframe_testing: bool,
		inject_cb: FrameCallback | None = None,
		do_not_inject_axe: bool = False,
	) -> Any:
		source = resolve_script(script)

		# Held for the whole traversal: the driver has a single current frame
		with self._lock:
			self.logger.debug(
				f'Injecting axe into session {self.driver.session_id} ({runner.mode}, '
				f'iframes={"off" if disable_iframe_testing else "on"}, '
				f'inject={"off" if do_not_inject_axe else "on"})'
			)
			switch_to_default(self.driver, self._context)
			result = run_injection(
				self.driver,
				source,
				runner,
				do_not_inject_axe=do_not_inject_axe,
				inject_cb=inject_cb,
			)

			if not disable_iframe_testing:
				FrameTraverser(
					self.driver,
					source,
					runner,
					inject_cb=inject_cb,
					do_not_inject_axe=do_not_inject_axe,
					context=self._context,
					logger=self.logger,
				).traverse()

			return result

	@property
	def is_busy(self) -> bool:
		"""Whether an injection is currently running through this injector."""
		return self._lock.locked()

	@property
	def is_in_frame(self) -> bool:
		"""Check if the driver is currently switched into a frame by this injector."""
		return not self._context.is_default

	@property
	def frame_depth(self) -> int:
		"""Get the current frame nesting depth."""
		return self._context.depth


def inject(
	driver: 'WebDriver',
	script: ScriptSource,
	disable_iframe_testing: bool = False,
	inject_cb: FrameCallback | None = None,
	do_not_inject_axe: bool = False,
	logger: logging.Logger | None = None,
) -> Any:
	"""Synchronously inject axe into the page and its frames. See AxeInjector.inject."""
	return AxeInjector(driver, logger=logger).inject(
		script,
		disable_iframe_testing=disable_iframe_testing,
		inject_cb=inject_cb,
		do_not_inject_axe=do_not_inject_axe,
	)


def inject_async(
	driver: 'WebDriver',
	script: ScriptSource,
	disable_iframe_testing: bool = False,
	logger: logging.Logger | None = None,
) -> Any:
	"""Inject axe with execute_async_script into the page and its frames. See AxeInjector.inject_async."""
	return AxeInjector(driver, logger=logger).inject_async(script, disable_iframe_testing=disable_iframe_testing)
