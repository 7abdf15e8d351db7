# ---------------------- Engine ----------------------
ERROR_TEXT = "Error"
ERROR_RESET_MS = 1000       # auto-clear delay after division by zero
ROUND_DECIMALS = 8
THOUSANDS_SEP = ","

OP_ADD = '+'
OP_SUB = '-'
OP_MUL = '×'
OP_DIV = '÷'
OPERATIONS = (OP_ADD, OP_SUB, OP_MUL, OP_DIV)

# Keyboard characters normalized to display operators
OPERATOR_ALIASES = {'*': OP_MUL, '/': OP_DIV}

# ---------------------- Audio ----------------------
SAMPLE_RATE = 44100
VOLUME = 0.25

CATEGORY_NOTES = {
    'digit': 'C5',
    'operator': 'E4',
    'equals': 'G5',
    'clear': 'C4',
    'delete': 'C4',
}

# MonoSynth voice
ENV_ATTACK = 0.01
ENV_DECAY = 0.1
ENV_SUSTAIN = 0.2
ENV_RELEASE = 0.1
GATE_TIME = 0.15            # release starts this long after the attack
GLIDE_SEMITONES = 7         # perfect fifth
GLIDE_TIME = 0.1

# ---------------------- Window ----------------------
WINDOW_TITLE = "Modern Calculator"
WINDOW_GEOMETRY = "340x500"
BG_COLOR = "#1e1e2e"
DISPLAY_BG = "#11111b"
PREVIOUS_FG = "#a6adc8"
CURRENT_FG = "#ffffff"
BUTTON_BG = "#313244"
OPERATOR_BG = "#f9a826"
SPECIAL_BG = "#45475a"
PREVIOUS_FONT = ("Arial", 14)
CURRENT_FONT = ("Arial", 30, "bold")
BUTTON_FONT = ("Arial", 16)
