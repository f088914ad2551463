from colorama import Fore, Style


# -------------------------------------------------------------------------------------------------
def print_verbose_message(message):
    print(message)


# -------------------------------------------------------------------------------------------------
def print_warning_message(message):
    print(F"{Fore.YELLOW}WARNING: {message}{Style.RESET_ALL}")


# -------------------------------------------------------------------------------------------------
def print_error_message(message):
    print(F"{Fore.RED}ERROR: {message}{Style.RESET_ALL}")


# -------------------------------------------------------------------------------------------------
class ConversionError(Exception):
    pass


# -------------------------------------------------------------------------------------------------
class NoMeshFoundError(ConversionError):
    pass


# -------------------------------------------------------------------------------------------------
class InvalidPolygonError(ConversionError):
    pass


# -------------------------------------------------------------------------------------------------
class PolygonSizeError(InvalidPolygonError):
    pass


# -------------------------------------------------------------------------------------------------
class IndexOverflowError(ConversionError):
    pass


# -------------------------------------------------------------------------------------------------
class LayerError(ConversionError):

    # ---------------------------------------------------------------------------------------------
    def __init__(self, element_name, message):
        super().__init__(F"{message} in {element_name}")
        self.element_name = element_name


# -------------------------------------------------------------------------------------------------
class UnsupportedEncodingError(LayerError):

    # ---------------------------------------------------------------------------------------------
    def __init__(self, element_name, mapping_mode, reference_mode):
        super().__init__(element_name, F"Unhandled reference_mode and mapping_mode combination {reference_mode.value} - {mapping_mode.value}")
        self.mapping_mode = mapping_mode
        self.reference_mode = reference_mode


# -------------------------------------------------------------------------------------------------
class InvalidLayerError(LayerError):
    pass
