class PdfMergerError(Exception):
    pass


class ConfigurationError(PdfMergerError):
    pass


class ScanError(PdfMergerError):
    pass


class MergeError(PdfMergerError):
    pass


class PdfValidationError(PdfMergerError):
    pass
