"""Protocol literals.

Keep these in one place to avoid stringly-typed word handling.
"""

# Word prefixes
TAG = ".tag="
ARGUMENT = "="
QUERY = "?"

# Query condition actions
ACTION_EXIST = ""
ACTION_NOT_EXIST = "-"
ACTION_EQUALS = "="
ACTION_LESS_THAN = "<"
ACTION_GREATER_THAN = ">"

ACTIONS = frozenset((
    ACTION_EXIST,
    ACTION_NOT_EXIST,
    ACTION_EQUALS,
    ACTION_LESS_THAN,
    ACTION_GREATER_THAN,
))

# Query stack operators
OP_NOT = "#!"
OP_OR = "#|"
OP_AND = "#&"

# The empty word terminates a sentence
END = ""
