"""Default configuration values."""

DEFAULT_CONFIG_YAML = """\
config:
  # auto: style diagnostics when stderr is a terminal and NO_COLOR is unset
  color: auto
  # false disables styles entirely
  styles: true

arrays:
  default_capacity: 5
  # double: grow full arrays, fixed: fail when full
  growth: double
  max_capacity: 65535

symbols:
  error: "✖"
  info: "●"
"""
