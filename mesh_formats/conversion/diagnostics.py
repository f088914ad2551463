from mesh_formats.shared.enums import Severity, DiagnosticCode
import mesh_formats.conversion.errors as error


# -------------------------------------------------------------------------------------------------
class Diagnostic:

    # ---------------------------------------------------------------------------------------------
    def __init__(self, severity, code, message, count=1):
        self.severity = severity
        self.code = code
        self.message = message
        self.count = count

    # ---------------------------------------------------------------------------------------------
    def __repr__(self):
        return F"Diagnostic({self.severity.name}, {self.code.value}, '{self.message}')"


# -------------------------------------------------------------------------------------------------
class Diagnostics:
    """
    Collects everything noteworthy that happens during a single conversion.

    Nothing recorded here aborts the conversion, the caller inspects `error_count`
    afterwards and decides what to do with it.
    """

    # ---------------------------------------------------------------------------------------------
    def __init__(self, params={}):
        self.params = {
            'verbose': False,
            'warnings_as_errors': False,
            'echo': True,
        } | params
        self.entries = []

    # ---------------------------------------------------------------------------------------------
    def verbose(self, message):
        if not self.params['verbose']:
            return
        self.entries.append(Diagnostic(Severity.VERBOSE, DiagnosticCode.PROGRESS, message))
        if self.params['echo']:
            error.print_verbose_message(message)

    # ---------------------------------------------------------------------------------------------
    def warning(self, code, message, count=1):
        self.entries.append(Diagnostic(Severity.WARNING, code, message, count))
        if self.params['echo']:
            if self.params['warnings_as_errors']:
                error.print_error_message(message)
            else:
                error.print_warning_message(message)

    # ---------------------------------------------------------------------------------------------
    def error(self, code, message, count=1):
        self.entries.append(Diagnostic(Severity.ERROR, code, message, count))
        if self.params['echo']:
            error.print_error_message(message)

    # ---------------------------------------------------------------------------------------------
    @property
    def errors(self):
        return [entry for entry in self.entries if entry.severity == Severity.ERROR]

    # ---------------------------------------------------------------------------------------------
    @property
    def warnings(self):
        return [entry for entry in self.entries if entry.severity == Severity.WARNING]

    # ---------------------------------------------------------------------------------------------
    @property
    def error_count(self):
        if self.params['warnings_as_errors']:
            return len(self.errors) + len(self.warnings)
        return len(self.errors)

    # ---------------------------------------------------------------------------------------------
    @property
    def warning_count(self):
        return len(self.warnings)

    # ---------------------------------------------------------------------------------------------
    def find(self, code):
        return [entry for entry in self.entries if entry.code == code]

    # ---------------------------------------------------------------------------------------------
    def total(self, code):
        """
        Sum of the counts of all records with the given code, aggregate warnings count many vertices at once.
        """
        return sum(entry.count for entry in self.find(code))
