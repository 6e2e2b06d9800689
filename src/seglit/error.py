class SeglitError(RuntimeError):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)


class TemplateSyntaxError(SeglitError):
    def __init__(self, format_string, message):
        super().__init__(f"{format_string!r}: {message}")
        self.format_string = format_string


class MissingValueError(SeglitError):
    def __init__(self, field):
        super().__init__(f"No value supplied for field {{{field}}}")
        self.field = field
