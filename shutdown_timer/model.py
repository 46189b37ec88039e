# modelo dos campos de horas, minutos e segundos

# limites fechados de cada campo
FIELD_RANGES = {
    "hours": (0, 24),
    "minutes": (0, 60),
    "seconds": (0, 60),
}


class OutOfRangeError(ValueError):
    """Valor fora do intervalo permitido para o campo."""

    def __init__(self, field, value, low, high):
        super().__init__(f"invalid {field}: {value!r} not in [{low}, {high}]")
        self.field = field
        self.value = value
        self.low = low
        self.high = high


def options_for(field):
    low, high = FIELD_RANGES[field]
    return list(range(low, high + 1))


def _check(field, value):
    low, high = FIELD_RANGES[field]
    # bool é subclasse de int, mas não é uma seleção válida
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        raise OutOfRangeError(field, value, low, high)
    return value


class TimerInputModel:
    """Guarda a seleção atual e encaminha as ações de desligar e cancelar.

    As ações externas são injetadas: ``schedule_shutdown(delay_seconds)`` e
    ``cancel_shutdown()``.
    """

    def __init__(self, schedule_shutdown, cancel_shutdown, hours=0, minutes=0, seconds=0):
        self._schedule_shutdown = schedule_shutdown
        self._cancel_shutdown = cancel_shutdown
        self._hours = _check("hours", hours)
        self._minutes = _check("minutes", minutes)
        self._seconds = _check("seconds", seconds)

    @property
    def hours(self):
        return self._hours

    @property
    def minutes(self):
        return self._minutes

    @property
    def seconds(self):
        return self._seconds

    def set_hours(self, value):
        self._hours = _check("hours", value)

    def set_minutes(self, value):
        self._minutes = _check("minutes", value)

    def set_seconds(self, value):
        self._seconds = _check("seconds", value)

    def set_field(self, field, value):
        if field not in FIELD_RANGES:
            raise KeyError(field)
        getattr(self, f"set_{field}")(value)

    def total_seconds(self):
        return self._seconds + self._minutes * 60 + self._hours * 3600

    def is_enabled(self):
        return self.total_seconds() > 0

    # função de desligamento: sem tempo selecionado não faz nada
    def request_shutdown(self):
        if not self.is_enabled():
            return False
        self._schedule_shutdown(self.total_seconds())
        return True

    # função de cancelamento
    def request_abort(self):
        self._cancel_shutdown()

    def __repr__(self):
        return f"TimerInputModel(hours={self._hours}, minutes={self._minutes}, seconds={self._seconds})"
