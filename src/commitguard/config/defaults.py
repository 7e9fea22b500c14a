"""Starter .commitguard.toml template and custom rule example."""

DEFAULT_TOML = """\
# commitguard configuration
extends = ["conventional"]
plugins = []

[output]
format = "terminal"       # terminal | json | text
show_summary = true

# Each rule is [level, applicability, options]
#   level:         0 = off, 1 = warning, 2 = error
#   applicability: "always" | "never" (never inverts the check)
[rules]
"body-leading-blank" = [1, "always"]
"footer-leading-blank" = [1, "always"]
"header-max-length" = [0, "always", 80]
"scope-case" = [2, "always", ["upper-case", "lower-case"]]
"scope-empty" = [2, "never"]
"scope-enum" = [0]
"subject-empty" = [2, "never"]
"subject-full-stop" = [2, "never", "."]
"subject-case" = [2, "always", [
    "lower-case",
    "upper-case",
    "camel-case",
    "kebab-case",
    "pascal-case",
    "sentence-case",
    "snake-case",
    "start-case",
]]
"type-case" = [2, "always", "lower-case"]
"type-empty" = [2, "never"]
"type-enum" = [2, "always", [
    "build", "chore", "ci", "docs", "feat", "fix",
    "perf", "refactor", "revert", "style", "test",
]]
"""

TICKET_SCOPE_RULE_YAML = """\
# Custom rules are active as soon as they are loaded.
# Set them to [0] under [rules] in .commitguard.toml to switch one off.
- name: scope-ticket
  field: scope
  pattern: "[A-Za-z0-9]+-[0-9]+"
  message: "scope must match jira ticket regex [A-Za-z0-9]+-[0-9]+"
  allow_empty: true
  severity: error
"""
