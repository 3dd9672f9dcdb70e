"""
Main.py:
Handles pipeline and CLI
"""

import argparse
import logging
import os
import sys
import time
from typing import IO, List, Optional

import psutil

from matcher.constants.constants import (
    CHECKPOINT_INTERVAL,
    DEFAULT_INPUT_FILE,
    SUFFIX_SAMPLE_INTERVAL,
)
from matcher.index.solutionIndex import Metrics, SolutionIndexBuilder
from matcher.models.errors import InputError
from matcher.models.patternMatcher import PatternMatcherInput, PatternMatcherOutput
from matcher.mpm_parser.parser import ParsedInput, Parser
from matcher.patternMatcher.patternMatcher import PatternMatcher, format_positions

logger = logging.getLogger("matcher")


def get_memory_usage():
    """Get current memory usage in bytes using psutil"""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss

def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description='Multiple Pattern Matching with an FM index')

    parser.add_argument('-i', '--input_file', default=DEFAULT_INPUT_FILE,
                        help='Input file: text on the first line, then the patterns')

    # Optional arguments
    parser.add_argument('-o', '--output', help='Write positions to this file instead of stdout')
    parser.add_argument('-c', '--checkpoint', type=int, default=CHECKPOINT_INTERVAL, help='Checkpoint interval C')
    parser.add_argument('-k', '--sample', type=int, default=SUFFIX_SAMPLE_INTERVAL, help='Suffix sample interval K')
    parser.add_argument('-p', '--processes', type=int, default=1, help='Worker processes for searching')
    parser.add_argument('--expected', help='Expected output file to compare against')
    parser.add_argument('-m', '--memory', action='store_true', help='Track memory usage')
    parser.add_argument('--debug', action='store_true', help='Print debugging information')

    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    startTime = time.perf_counter()
    startCpuTime = time.process_time()

    if args.memory:
        baseline_memory = get_memory_usage()

    try:
        with open(args.input_file, "r") as inputFile:
            parsed : ParsedInput = Parser(inputFile).parseInput()
        expected = None
        if args.expected:
            with open(args.expected, "r") as expectedFile:
                expected = SolutionIndexBuilder().getSolutionPositions(expectedFile)
    except FileNotFoundError as e:
        logger.error("File not found: %s", e.filename)
        return 2
    except InputError as e:
        logger.error("Bad input: %s", e)
        return 2

    matcherInput = PatternMatcherInput(
        text=parsed.text,
        patterns=parsed.patterns,
        checkpointInterval=args.checkpoint,
        sampleInterval=args.sample,
        processes=args.processes,
    )
    try:
        output : PatternMatcherOutput = PatternMatcher().matchPatterns(matcherInput)
    except InputError as e:
        logger.error("Bad input: %s", e)
        return 2

    line = format_positions(output.positions)
    if args.output:
        outputFile : IO = open(args.output, "w")
        outputFile.write(line + "\n")
        outputFile.close()
    else:
        print(line)

    if expected is not None:
        metrics : Metrics = SolutionIndexBuilder().computeMetrics(output.positions, expected)
        print(metrics, file=sys.stderr)

    if args.memory:
        memory_used = get_memory_usage() - baseline_memory
        print(f"\nTotal memory used: {memory_used / 10**6:.2f} MB", file=sys.stderr)

    elapsedTime = time.perf_counter() - startTime
    elapsedCpuTime = time.process_time() - startCpuTime
    print(f"Matched {output.numberOfPatterns} patterns against a text of {len(parsed.text)} symbols.", file=sys.stderr)
    print(f"The 'main' part took {elapsedTime:.4f} seconds to execute.", file=sys.stderr)
    print(f"The 'main cpu' part took {elapsedCpuTime:.4f} seconds to execute.", file=sys.stderr)

    if expected is not None and not metrics.Exact:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
