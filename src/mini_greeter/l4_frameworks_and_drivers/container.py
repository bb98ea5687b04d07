"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from mini_greeter.l2_use_cases.load_config_use_case import LoadConfigUseCase
from mini_greeter.l2_use_cases.ports.color_parser import ColorParser
from mini_greeter.l2_use_cases.ports.key_file_source import KeyFileOpener
from mini_greeter.l2_use_cases.ports.keycode_resolver import KeycodeResolver
from mini_greeter.l3_interface_adapters.gateways.ini_key_file_source import IniKeyFileSource
from mini_greeter.l3_interface_adapters.gateways.keysym_resolver import KeysymResolver
from mini_greeter.l3_interface_adapters.gateways.textual_color_parser import TextualColorParser


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        open_source: KeyFileOpener | None = None,
        color_parser: ColorParser | None = None,
        keycode_resolver: KeycodeResolver | None = None,
    ) -> None:
        self.open_source: KeyFileOpener = open_source or IniKeyFileSource.from_path
        self.color_parser: ColorParser = color_parser or TextualColorParser()
        self.keycode_resolver: KeycodeResolver = keycode_resolver or KeysymResolver()

        self.config_loader = LoadConfigUseCase(
            open_source=self.open_source,
            color_parser=self.color_parser,
            keycode_resolver=self.keycode_resolver,
        )
