"""Discrete volume levels.

Volume runs from silent to fff in ten evenly spaced levels (0-252), leaving
headroom below 255 for the renderer.
"""

STEP_SIZE = 28

SILENT = 0
PPP = 1 * STEP_SIZE
PP = 2 * STEP_SIZE
P = 3 * STEP_SIZE
MP = 4 * STEP_SIZE
M = 5 * STEP_SIZE
MF = 6 * STEP_SIZE
F = 7 * STEP_SIZE
FF = 8 * STEP_SIZE
FFF = 9 * STEP_SIZE

# Default for generated notes
DEFAULT_VOLUME = M

LEVELS = (SILENT, PPP, PP, P, MP, M, MF, F, FF, FFF)
