"""Application wiring: hub, window host, dialogs, actions and plugins."""

from __future__ import annotations

from typing import Any

import pluggy
from loguru import logger

from easel.actions import ActionManager
from easel.config import Settings, load_settings
from easel.dialogs import builtin as builtin_dialogs
from easel.dialogs.content import DialogRegistry
from easel.dialogs.manager import DialogLauncher, DialogManager
from easel.dialogs.prompts import DialogPrompter
from easel.hookspecs import EASEL_HOOK_NAMESPACE, EaselHookSpecs
from easel.ipc import ChannelHub
from easel.windows.host import WindowHost


class EaselApp:
    """Owns every long-lived component of one process.

    Plugins are loaded from the built-in module and from the `easel`
    entry point group; a plugin that raises while registering is logged
    and skipped.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        prompter: DialogPrompter | None = None,
        load_entrypoints: bool = True,
    ) -> None:
        self.settings = settings or load_settings()
        self.hub = ChannelHub()
        self.registry = DialogRegistry()
        self.host = WindowHost(self.hub, self.registry, prompter)
        self.dialogs = DialogManager(self.host, self.settings)
        self.launcher = DialogLauncher(self.dialogs)
        self.actions = ActionManager()
        self.failed_plugins: dict[str, str] = {}

        self._plugin_manager = pluggy.PluginManager(EASEL_HOOK_NAMESPACE)
        self._plugin_manager.add_hookspecs(EaselHookSpecs)
        self._plugin_manager.register(builtin_dialogs, name="builtin")
        if load_entrypoints:
            self._plugin_manager.load_setuptools_entrypoints(EASEL_HOOK_NAMESPACE)

        self._call_hook("register_dialogs", registry=self.registry, settings=self.settings)
        self._call_hook("register_actions", actions=self.actions, launcher=self.launcher)

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register an extra plugin and let it add dialogs and actions."""
        plugin_name = self._plugin_manager.register(plugin, name=name)
        for hook_name, kwargs in (
            ("register_dialogs", {"registry": self.registry, "settings": self.settings}),
            ("register_actions", {"actions": self.actions, "launcher": self.launcher}),
        ):
            self._call_hook(hook_name, only=plugin_name, **kwargs)

    def hook_report(self) -> dict[str, list[str]]:
        """Hook name -> plugin names, for diagnostics."""
        report: dict[str, list[str]] = {}
        for hook_name in ("register_dialogs", "register_actions"):
            hook = getattr(self._plugin_manager.hook, hook_name)
            names = [impl.plugin_name for impl in hook.get_hookimpls()]
            if names:
                report[hook_name] = names
        return report

    def shutdown(self) -> None:
        aborted = self.dialogs.abort_all()
        self.host.close_all()
        logger.debug("app.shutdown aborted_dialogs={}", aborted)

    def _call_hook(self, hook_name: str, *, only: str | None = None, **kwargs: Any) -> None:
        hook = getattr(self._plugin_manager.hook, hook_name)
        for impl in hook.get_hookimpls():
            if only is not None and impl.plugin_name != only:
                continue
            call_kwargs = {name: kwargs[name] for name in impl.argnames if name in kwargs}
            try:
                impl.function(**call_kwargs)
            except Exception as exc:
                self.failed_plugins[impl.plugin_name] = str(exc)
                logger.opt(exception=True).warning("plugin.failed hook={} plugin={}", hook_name, impl.plugin_name)
