"""
Fake Selenium driver modelling a page with nested frames.

FakeDriver keeps a stack of the frames it is switched into, exactly like a
real driver's current browsing context, and records every switch and script
execution so tests can assert on order and balance.
"""

import threading
from typing import Any

import pytest
from selenium.common.exceptions import (
	JavascriptException,
	NoSuchFrameException,
	StaleElementReferenceException,
	TimeoutException,
	WebDriverException,
)
from selenium.webdriver.common.by import By

AXE_SCRIPT = 'window.axe = {run: function () {}}; return "injected";'


class FakeFrame:
	"""A document (top-level or frame) and the frame element that hosts it."""

	def __init__(
		self,
		name: str,
		children: list['FakeFrame'] | None = None,
		detached: bool = False,
		script_error: bool = False,
		script_timeout: bool = False,
		stale_children: bool = False,
		gated: bool = False,
	):
		self.name = name
		self.children = children or []
		self.detached = detached
		self.script_error = script_error
		self.script_timeout = script_timeout
		self.stale_children = stale_children
		# Async scripts in a gated frame only complete once `gate` is set
		self.gate = threading.Event() if gated else None
		self.started = threading.Event()

	def __repr__(self) -> str:
		return f'FakeFrame({self.name!r})'


class FakeSwitchTo:
	def __init__(self, driver: 'FakeDriver'):
		self._driver = driver

	def default_content(self) -> None:
		self._driver.stack.clear()
		self._driver.log.append(('default_content', 'top'))

	def frame(self, frame: FakeFrame) -> None:
		if frame.detached:
			raise NoSuchFrameException(f'{frame.name} is no longer attached')
		self._driver.stack.append(frame)
		self._driver.log.append(('frame', frame.name))

	def parent_frame(self) -> None:
		if self._driver.fail_parent_frame:
			raise WebDriverException('browsing context has been discarded')
		if self._driver.stack:
			frame = self._driver.stack.pop()
			self._driver.log.append(('parent_frame', frame.name))


class FakeDriver:
	def __init__(self, root: FakeFrame):
		self.root = root
		self.stack: list[FakeFrame] = []
		self.log: list[tuple[str, str]] = []
		self.executed: list[tuple[str, str]] = []
		self.lookups: list[tuple[str, str]] = []
		self.fail_parent_frame = False
		self.session_id = 'fake-session'
		self.switch_to = FakeSwitchTo(self)

	@property
	def current(self) -> FakeFrame:
		return self.stack[-1] if self.stack else self.root

	@property
	def depth(self) -> int:
		return len(self.stack)

	def find_elements(self, by: str, value: str) -> list[FakeFrame]:
		self.lookups.append((by, value))
		if by != By.XPATH:
			raise AssertionError(f'Unexpected locator strategy: {by}')
		if self.current.stale_children:
			raise StaleElementReferenceException(f'{self.current.name} was reloaded')
		return list(self.current.children)

	def execute_script(self, script: str, *args: Any) -> Any:
		return self._execute('sync', script)

	def execute_async_script(self, script: str, *args: Any) -> Any:
		frame = self.current
		frame.started.set()
		if frame.gate is not None and not frame.gate.wait(timeout=10):
			raise AssertionError(f'{frame.name} never completed')
		return self._execute('async', script)

	def _execute(self, mode: str, script: str) -> Any:
		frame = self.current
		self.executed.append((mode, frame.name))
		self.log.append(('execute', frame.name))
		if frame.script_error:
			raise JavascriptException(f'axe threw inside {frame.name}')
		if frame.script_timeout:
			raise TimeoutException(f'script timed out in {frame.name}')
		return f'{frame.name}-result'

	@property
	def visited(self) -> list[str]:
		return [name for _, name in self.executed]

	@property
	def frame_switches(self) -> list[str]:
		return [name for action, name in self.log if action == 'frame']

	@property
	def parent_switches(self) -> list[str]:
		return [name for action, name in self.log if action == 'parent_frame']


def build_page(**frame_options: dict[str, Any]) -> FakeFrame:
	"""
	Build the page used throughout the tests:

		top
		├── frameA
		│   └── frameA1
		└── frameB
		    └── frameB1
	"""

	def frame(name: str, children: list[FakeFrame] | None = None) -> FakeFrame:
		return FakeFrame(name, children, **frame_options.get(name, {}))

	return frame(
		'top',
		[
			frame('frameA', [frame('frameA1')]),
			frame('frameB', [frame('frameB1')]),
		],
	)


@pytest.fixture
def make_driver():
	"""Build a FakeDriver over the standard page, with per-frame behaviour overrides."""

	def _make_driver(**frame_options: dict[str, Any]) -> FakeDriver:
		return FakeDriver(build_page(**frame_options))

	return _make_driver


@pytest.fixture
def driver(make_driver) -> FakeDriver:
	return make_driver()
