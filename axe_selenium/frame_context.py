"""
Frame context tracking for Selenium-driven injection.

Selenium keeps a single "current frame" per driver and offers no way to ask
how deep it is. FrameContext mirrors every switch so the traversal can tell
where the driver is, and entered_frame() pairs each switch into a frame with
exactly one switch back to its parent.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager, suppress
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from selenium.common.exceptions import WebDriverException

if TYPE_CHECKING:
	from selenium.webdriver.remote.webdriver import WebDriver
	from selenium.webdriver.remote.webelement import WebElement

logger = logging.getLogger(__name__)


@dataclass
class FrameContext:
	"""Tracks the frames the driver is currently switched into."""

	stack: list[str] = field(default_factory=list)  # Frame markers, outermost first
	is_default: bool = True  # Whether we're in the default/top content

	def push(self, marker: str) -> None:
		"""Push a frame marker onto the stack."""
		self.stack.append(marker)
		self.is_default = False

	def pop(self) -> str | None:
		"""Pop the innermost frame marker from the stack."""
		if self.stack:
			frame = self.stack.pop()
			self.is_default = len(self.stack) == 0
			return frame
		return None

	def clear(self) -> None:
		"""Clear the stack (return to default content)."""
		self.stack.clear()
		self.is_default = True

	@property
	def depth(self) -> int:
		return len(self.stack)

	@property
	def path(self) -> str:
		"""Human readable frame path, e.g. ``top > index:0 > index:2``."""
		return ' > '.join(['top', *self.stack])


def switch_to_default(driver: 'WebDriver', context: FrameContext) -> None:
	"""Switch the driver to the top-level document."""
	driver.switch_to.default_content()
	context.clear()


def switch_to_parent(driver: 'WebDriver', context: FrameContext) -> None:
	"""Switch the driver to the parent of the current frame."""
	try:
		driver.switch_to.parent_frame()
	finally:
		context.pop()


@contextmanager
def entered_frame(
	driver: 'WebDriver',
	frame: 'WebElement',
	context: FrameContext,
	marker: str,
) -> Iterator[FrameContext]:
	"""
	Switch into a frame for the duration of the block.

	If the switch itself fails nothing is pushed and the error propagates
	before the block runs. Once inside, the driver is always switched back to
	the parent frame when the block exits. When the block raised, a failure to
	switch back is suppressed so the original error is the one that
	propagates.

	Usage:
		with entered_frame(driver, iframe_element, context, 'index:0'):
			driver.execute_script(script)
	"""
	driver.switch_to.frame(frame)
	context.push(marker)
	logger.debug(f'Switched to frame {context.path}')

	try:
		yield context
	except BaseException:
		with suppress(WebDriverException):
			switch_to_parent(driver, context)
		raise
	switch_to_parent(driver, context)
