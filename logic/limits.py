# logic/limits.py
# This file is part of Entail - A Propositional Argument Validator
#
# Capacity limits enforced before the engine runs

"""
Supported sizes for an argument. Enumeration is exponential in the number of
variables, so these bounds are checked when an argument is declared and a
CapacityError is raised instead of truncating anything.
"""

MAX_VARIABLES = 8
MAX_PREMISES = 8
MAX_TOKENS = 64
