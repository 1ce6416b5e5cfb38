# Output formatter plugins
#
# Each plugin lives in its own subpackage and exposes create_plugin(),
# returning an object that satisfies protocol.FormatterPlugin.
