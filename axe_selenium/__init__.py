"""
axe-core injection for Selenium WebDriver.

Injects the axe accessibility engine into a page and into every frame and
iframe nested in it, so axe can scan each frame from its own context.

- Synchronous and asynchronous (execute_async_script) injection
- Depth-first frame traversal that restores the parent frame on every path
- Frames that cannot be entered are skipped, script errors always propagate
"""

from axe_selenium.config import InjectionOptions
from axe_selenium.exceptions import AxeScriptLoadError, AxeSeleniumError
from axe_selenium.executor import (
	AsyncScriptRunner,
	ScriptRunner,
	SyncScriptRunner,
	execute_async_script,
	execute_script,
)
from axe_selenium.frame_context import FrameContext
from axe_selenium.injector import FRAME_XPATH, AxeInjector, FrameTraverser, inject, inject_async
from axe_selenium.logging_config import setup_logging
from axe_selenium.providers import (
	AxeScriptProvider,
	FileAxeScriptProvider,
	PackageResourceAxeScriptProvider,
	StringAxeScriptProvider,
	provider_from_config,
)
from axe_selenium.session import AxeSeleniumSession

__all__ = [
	'inject',
	'inject_async',
	'AxeInjector',
	'FrameTraverser',
	'FrameContext',
	'FRAME_XPATH',
	'AxeSeleniumSession',
	# Script execution
	'ScriptRunner',
	'SyncScriptRunner',
	'AsyncScriptRunner',
	'execute_script',
	'execute_async_script',
	# Script providers
	'AxeScriptProvider',
	'StringAxeScriptProvider',
	'FileAxeScriptProvider',
	'PackageResourceAxeScriptProvider',
	'provider_from_config',
	# Configuration
	'InjectionOptions',
	'setup_logging',
	# Errors
	'AxeSeleniumError',
	'AxeScriptLoadError',
]
