# janela do temporizador de desligamento
import logging
import tkinter as tk
from tkinter import messagebox, ttk

from .model import options_for

logger = logging.getLogger(__name__)

FIELD_LABELS = (
    ("hours", "Horas"),
    ("minutes", "Minutos"),
    ("seconds", "Segundos"),
)


# o botão de desligar só fica ativo com algum tempo selecionado
def shutdown_button_state(model):
    return "normal" if model.is_enabled() else "disabled"


class ShutdownTimerApp:
    def __init__(self, root, model):
        self.root = root
        self.model = model
        self.selectors = {}
        self.setup_window()
        self.create_widgets()
        self.refresh_buttons()

    def setup_window(self):
        """Configurar a janela principal"""
        self.root.title("Temporizador de Desligamento")
        self.root.geometry("420x160")
        self.root.resizable(False, False)

    def create_widgets(self):
        """Criar os seletores e os botões"""
        main_frame = ttk.Frame(self.root, padding="12")
        main_frame.grid(row=0, column=0, sticky=(tk.W, tk.E, tk.N, tk.S))

        # um seletor por campo, oferecendo apenas valores válidos
        for column, (field, label) in enumerate(FIELD_LABELS):
            ttk.Label(main_frame, text=label).grid(row=0, column=column, padx=5, sticky=tk.W)
            combo = ttk.Combobox(main_frame, width=8, state="readonly")
            combo["values"] = [str(i) for i in options_for(field)]
            combo.set(str(getattr(self.model, field)))
            combo.bind("<<ComboboxSelected>>", lambda event, field=field: self.on_select(field))
            combo.grid(row=1, column=column, padx=5, pady=(0, 10))
            self.selectors[field] = combo

        button_frame = ttk.Frame(main_frame)
        button_frame.grid(row=2, column=0, columnspan=3, sticky=tk.E)

        self.shutdown_button = ttk.Button(button_frame, text="Desligar", command=self.on_shutdown_click)
        self.shutdown_button.grid(row=0, column=0, padx=5)

        self.abort_button = ttk.Button(button_frame, text="Cancelar", command=self.on_abort_click)
        self.abort_button.grid(row=0, column=1, padx=5)

    def on_select(self, field):
        value = int(self.selectors[field].get())
        self.model.set_field(field, value)
        logger.debug("%s set to %d", field, value)
        self.refresh_buttons()

    def refresh_buttons(self):
        self.shutdown_button.config(state=shutdown_button_state(self.model))

    # função de acionamento do desligamento
    def on_shutdown_click(self):
        try:
            self.model.request_shutdown()
        except OSError as e:
            logger.error("Unable to schedule shutdown: %s", e)
            messagebox.showerror("Erro", f"Não foi possível agendar o desligamento: {e}")

    # função de acionamento do cancelamento
    def on_abort_click(self):
        try:
            self.model.request_abort()
        except OSError as e:
            logger.error("Unable to abort shutdown: %s", e)
            messagebox.showerror("Erro", f"Não foi possível cancelar o desligamento: {e}")

    def run(self):
        self.root.mainloop()


def launch(model):
    app = ShutdownTimerApp(tk.Tk(), model)
    app.run()
    return app
