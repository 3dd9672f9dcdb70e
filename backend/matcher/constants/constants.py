# Defaults only. Builders and searchers take their intervals as arguments.

SENTINEL = "$"

CHECKPOINT_INTERVAL = 5     # C: spacing of the rank checkpoints
SUFFIX_SAMPLE_INTERVAL = 5  # K: keep suffix offsets divisible by K

NUM_PROCESSES = 8
DEFAULT_INPUT_FILE = "multiple-pattern-matching-sample-input.txt"
