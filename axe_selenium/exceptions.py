"""
Errors raised by axe_selenium.

Three kinds of failure can happen while injecting axe:

- Script-runtime errors: the injected payload itself threw. These surface as
  selenium's ``JavascriptException`` and are never wrapped.
- Context-navigation errors: a frame could not be entered or acted upon.
  These are swallowed by the frame traversal and never reach the caller.
- Payload-load errors: the axe source could not be loaded before injection
  started. These are raised as ``AxeScriptLoadError``.
"""


class AxeSeleniumError(Exception):
	"""Base class for errors raised by axe_selenium itself."""


class AxeScriptLoadError(AxeSeleniumError, OSError):
	"""The axe script source could not be loaded from its provider."""
