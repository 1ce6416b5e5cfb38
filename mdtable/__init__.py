# mdtable package
#
# Repairs ragged pipe ("Markdown") tables and pads cell text to a display
# width measured with Unicode East Asian Width rules.
#
#   from mdtable import read_table, complete_table, CompleteOptions
#
#   completed = complete_table(read_table(lines), CompleteOptions(delimiter_width=3))
#   print(completed.table.to_text())
#
# Lazy loading: imports are deferred via __getattr__ so the formatting core
# can be used without pulling in the config loader's file-format libraries.

# Mapping from public name -> (module_path, attribute_name)
_LAZY_IMPORTS = {
    # Alignment
    "Alignment": (".alignment", "Alignment"),
    "alignment_of": (".alignment", "alignment_of"),
    # Width measurement
    "WidthPolicy": (".display_width", "WidthPolicy"),
    "compute_width": (".display_width", "compute_width"),
    # Completion and alignment
    "AlignConfig": (".formatter", "AlignConfig"),
    "CompleteOptions": (".formatter", "CompleteOptions"),
    "CompletedTable": (".formatter", "CompletedTable"),
    "align": (".formatter", "align"),
    "complete_table": (".formatter", "complete_table"),
    "delimiter_text": (".formatter", "delimiter_text"),
    "extend_array": (".formatter", "extend_array"),
    # Table structure
    "Table": (".table", "Table"),
    "TableRow": (".table", "TableRow"),
    "read_table": (".parser", "read_table"),
    "read_table_row": (".parser", "read_table_row"),
    # Errors
    "TableFormatError": (".errors", "TableFormatError"),
    "EmptyTableError": (".errors", "EmptyTableError"),
    "UnknownAlignmentError": (".errors", "UnknownAlignmentError"),
    "InvalidDefaultAlignmentError": (".errors", "InvalidDefaultAlignmentError"),
    # Configuration
    "FormatterConfig": (".config_loader", "FormatterConfig"),
    "ConfigValidationError": (".config_loader", "ConfigValidationError"),
    "load_config": (".config_loader", "load_config"),
    # Plugins
    "FormatterPlugin": (".plugins.protocol", "FormatterPlugin"),
}


def __getattr__(name):
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        import importlib
        module = importlib.import_module(module_path, __name__)
        value = getattr(module, attr_name)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_LAZY_IMPORTS)
