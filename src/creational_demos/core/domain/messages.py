"""Catálogo de mensajes de las demos.

Por qué un catálogo:
- Las variantes solo difieren en el literal que imprimen; tenerlos aquí
  deja a los componentes sin strings sueltos.
- Permite servir la misma demo en inglés o en portugués sin ramificar
  en cada clase.
"""

from __future__ import annotations

from creational_demos.core.domain.language import Language

MESSAGES: dict[Language, dict[str, str]] = {
    Language.ENGLISH: {
        # Abstract Factory
        "mac_button": "Mac button rendered!",
        "mac_checkbox": "Mac checkbox rendered!",
        "win_button": "Windows button rendered!",
        "win_checkbox": "Windows checkbox rendered!",
        # Factory Method
        "html_button": "HTML button rendered!",
        "windows_dialog_button": "Windows button rendered!",
        "click_handler": "Button click handler added!",
        # Builder (car manual)
        "manual_seats": "{seats} seat(s)",
        "manual_engine": "Engine v{cylinders}, power: {power}",
        "manual_trip_computer": "{inches} inches, bluetooth: {bluetooth}",
        "manual_none": "none",
        "manual_gps_advanced": "Advanced",
        "manual_gps_basic": "Basic",
        "manual_gps_unregistered": "GPS not registered",
        # CLI
        "no_demo_selected": "No demo selected. Available flags:",
    },
    Language.PORTUGUESE: {
        "mac_button": "Botão Mac renderizado!",
        "mac_checkbox": "Checkbox Mac renderizado!",
        "win_button": "Botão Windows renderizado!",
        "win_checkbox": "Checkbox Windows renderizado!",
        "html_button": "Botão no estilo HTML renderizado!",
        "windows_dialog_button": "Botão no estilo Windows renderizado!",
        "click_handler": "Evento de click adicionado!",
        "manual_seats": "{seats} assento(s)",
        "manual_engine": "Motor v{cylinders}, potência: {power}",
        "manual_trip_computer": "{inches} polegadas, bluetooth: {bluetooth}",
        "manual_none": "não possui",
        "manual_gps_advanced": "Avançado",
        "manual_gps_basic": "Básico",
        "manual_gps_unregistered": "GPS não registrado",
        "no_demo_selected": "Nenhuma demo selecionada. Flags disponíveis:",
    },
}


def translate(key: str, language: Language | None = None, **params: object) -> str:
    """Devuelve el mensaje `key` en `language`, con fallback a inglés."""

    language = language or Language.default()
    catalog = MESSAGES.get(language, MESSAGES[Language.ENGLISH])
    template = catalog.get(key) or MESSAGES[Language.ENGLISH][key]
    return template.format(**params) if params else template
