from dataclasses import dataclass, field
from typing import Dict, List

from ..constants.constants import CHECKPOINT_INTERVAL, SUFFIX_SAMPLE_INTERVAL

@dataclass 
class PatternMatcherInput:
    # required fields
    text: str 
    patterns: List[str] 

    # optional fields 
    checkpointInterval: int = CHECKPOINT_INTERVAL 
    sampleInterval: int = SUFFIX_SAMPLE_INTERVAL
    processes: int = 1

@dataclass 
class PatternMatcherOutput:
    positions: List[int] = field(default_factory=list)                  # every hit, numeric ascending
    matchesPerPattern: Dict[str, List[int]] = field(default_factory=dict)
    numberOfPatterns: int = 0
