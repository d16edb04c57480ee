"""App Kivy: carga de lecturas, grilla de 7 días y exportación a PDF."""

from __future__ import annotations

from glucosa_tool.config import AppConfig
from glucosa_tool.model import STATUSES
from glucosa_tool.session import GLUCOSE_STEP, TrackerSession


def run_app(config: AppConfig) -> int:
    """Lanza la app Kivy."""
    from kivy.app import App
    from kivy.core.window import Window
    from kivy.resources import resource_find
    from kivy.uix.boxlayout import BoxLayout
    from kivy.uix.button import Button
    from kivy.uix.gridlayout import GridLayout
    from kivy.uix.label import Label
    from kivy.uix.textinput import TextInput
    from kivy.uix.togglebutton import ToggleButton

    class GlucosaToolApp(App):
        """Main Kivy app."""

        def __init__(self, **kwargs: object) -> None:
            super().__init__(**kwargs)
            self.session = TrackerSession(config)
            self.entry_day_input: TextInput | None = None
            self.glucose_input: TextInput | None = None
            self.reference_input: TextInput | None = None
            self.error_label: Label | None = None
            self.preview: TextInput | None = None
            self.status: Label | None = None
            self._preview_font = resource_find("data/fonts/RobotoMono-Regular.ttf")

        def build(self) -> BoxLayout:
            Window.bind(on_key_down=self._on_key_down)
            self.title = "Registro de glucosa"

            root = BoxLayout(orientation="vertical", spacing=8, padding=10)
            root.add_widget(self._build_entry_form())
            root.add_widget(self._build_report_controls())

            self.status = Label(text="", size_hint_y=None, height=30)
            root.add_widget(self.status)

            self.preview = TextInput(
                readonly=True,
                text="",
                multiline=True,
                do_wrap=False,
            )
            if self._preview_font:
                self.preview.font_name = self._preview_font
            root.add_widget(self.preview)

            self._refresh_preview()
            return root

        def _build_entry_form(self) -> BoxLayout:
            form = BoxLayout(orientation="vertical", spacing=6, size_hint_y=None)
            form.bind(minimum_height=form.setter("height"))

            day_row = BoxLayout(orientation="horizontal", size_hint_y=None, height=36)
            day_row.add_widget(Label(text="Fecha", size_hint_x=0.25))
            self.entry_day_input = TextInput(
                text=self.session.entry_day, multiline=False
            )
            day_row.add_widget(self.entry_day_input)
            form.add_widget(day_row)

            statuses = GridLayout(cols=4, spacing=4, size_hint_y=None, height=76)
            for status in STATUSES:
                btn = ToggleButton(
                    text=status,
                    group="status",
                    allow_no_selection=False,
                    state="down" if status == self.session.status else "normal",
                )
                btn.bind(on_press=lambda b: self.session.select_status(b.text))
                statuses.add_widget(btn)
            form.add_widget(statuses)

            glucose_row = BoxLayout(
                orientation="horizontal", spacing=4, size_hint_y=None, height=36
            )
            glucose_row.add_widget(Label(text="Glucosa", size_hint_x=0.25))
            minus_btn = Button(text=f"-{GLUCOSE_STEP}", size_hint_x=0.15)
            plus_btn = Button(text=f"+{GLUCOSE_STEP}", size_hint_x=0.15)
            self.glucose_input = TextInput(
                text=self.session.glucose_text, multiline=False, input_filter="float"
            )
            self.glucose_input.bind(focus=self._on_glucose_focus)
            minus_btn.bind(on_press=lambda *_args: self._on_adjust(-GLUCOSE_STEP))
            plus_btn.bind(on_press=lambda *_args: self._on_adjust(GLUCOSE_STEP))
            glucose_row.add_widget(minus_btn)
            glucose_row.add_widget(self.glucose_input)
            glucose_row.add_widget(plus_btn)
            form.add_widget(glucose_row)

            self.error_label = Label(
                text="", color=(1, 0.3, 0.3, 1), size_hint_y=None, height=24
            )
            form.add_widget(self.error_label)

            submit_btn = Button(text="Agregar lectura", size_hint_y=None, height=40)
            submit_btn.bind(on_press=self._on_submit)
            form.add_widget(submit_btn)
            return form

        def _build_report_controls(self) -> BoxLayout:
            row = BoxLayout(
                orientation="horizontal", spacing=8, size_hint_y=None, height=40
            )
            row.add_widget(Label(text="Consultar hasta", size_hint_x=0.25))
            self.reference_input = TextInput(
                text=self.session.report_reference, multiline=False
            )
            self.reference_input.bind(text=self._on_reference_change)
            row.add_widget(self.reference_input)
            export_btn = Button(text="Exportar PDF", size_hint_x=0.25)
            export_btn.bind(on_press=self._on_export)
            row.add_widget(export_btn)
            exit_btn = Button(text="Salir", size_hint_x=0.15)
            exit_btn.bind(on_press=lambda *_args: self.stop())
            row.add_widget(exit_btn)
            return row

        def _on_key_down(
            self,
            _window: object,
            keycode: int,
            _scancode: int,
            _text: str,
            _modifiers: list[str],
        ) -> bool:
            # Esc: salir de fullscreen o cerrar app.
            if keycode != 27:
                return False
            if Window.fullscreen:
                Window.fullscreen = False
            else:
                self.stop()
            return True

        def _on_glucose_focus(self, widget: TextInput, focused: bool) -> None:
            if not focused:
                self.session.set_glucose_text(widget.text)
                widget.text = self.session.glucose_text

        def _on_adjust(self, amount: float) -> None:
            if self.glucose_input is None:
                return
            self.session.glucose_text = self.glucose_input.text
            self.session.adjust_glucose(amount)
            self.glucose_input.text = self.session.glucose_text

        def _on_submit(self, _: object) -> None:
            if self.entry_day_input is None or self.glucose_input is None:
                return
            self.session.entry_day = self.entry_day_input.text.strip()
            self.session.set_glucose_text(self.glucose_input.text)
            reading = self.session.submit()
            if self.error_label is not None:
                self.error_label.text = self.session.error
            if reading is None:
                return
            self.glucose_input.text = self.session.glucose_text
            if self.status is not None:
                self.status.text = (
                    f"Agregada: {reading.day.isoformat()} {reading.status} "
                    f"{reading.display_value}"
                )
            self._refresh_preview()

        def _on_reference_change(self, _widget: TextInput, text: str) -> None:
            self.session.report_reference = text.strip()
            self._refresh_preview()

        def _on_export(self, _: object) -> None:
            result = self.session.export_pdf()
            if self.status is None:
                return
            if result.ok:
                self.status.text = f"PDF generado: {result.path}"
            else:
                self.status.text = f"Error al exportar PDF ({result.error})"

        def _refresh_preview(self) -> None:
            if self.preview is None:
                return
            self.preview.text = self.session.preview_text()

    GlucosaToolApp().run()
    return 0
