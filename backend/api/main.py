import io
from typing import Dict, List

from fastapi import FastAPI, Form, HTTPException, UploadFile
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from matcher.constants.constants import CHECKPOINT_INTERVAL, SUFFIX_SAMPLE_INTERVAL
from matcher.models.errors import InputError
from matcher.models.patternMatcher import PatternMatcherInput, PatternMatcherOutput
from matcher.mpm_parser.parser import ParsedInput, Parser
from matcher.patternMatcher.patternMatcher import APatternMatcher, PatternMatcher

class SearchRequest(BaseModel):
    text: str
    patterns: List[str]
    checkpointInterval: int = Field(default=CHECKPOINT_INTERVAL, ge=1)
    sampleInterval: int = Field(default=SUFFIX_SAMPLE_INTERVAL, ge=1)

class SearchResponse(BaseModel):
    positions: List[int]
    matchesPerPattern: Dict[str, List[int]]
    count: int

app = FastAPI()
patternMatcher : APatternMatcher = PatternMatcher()


def _respond(matcherInput: PatternMatcherInput) -> JSONResponse:
    try:
        output : PatternMatcherOutput = patternMatcher.matchPatterns(matcherInput)
    except InputError as e:
        raise HTTPException(status_code=422, detail=str(e))

    body = SearchResponse(
        positions=output.positions,
        matchesPerPattern=output.matchesPerPattern,
        count=len(output.positions),
    )
    headers = {
        "Matched-Positions-Count": str(body.count),
        "Access-Control-Expose-Headers": "Matched-Positions-Count"
    }
    return JSONResponse(content=body.model_dump(), headers=headers)


@app.get("/")
async def root():
    return {"message": "Test"}

@app.post("/matcher/matchPatterns")
async def matchPatterns(
    inputFile: UploadFile,
    checkpointInterval: int = Form(CHECKPOINT_INTERVAL, ge=1),
    sampleInterval: int = Form(SUFFIX_SAMPLE_INTERVAL, ge=1),
    ):
    content = await inputFile.read()
    try:
        parsed : ParsedInput = Parser(io.StringIO(content.decode('utf-8'))).parseInput()
    except (InputError, UnicodeDecodeError) as e:
        raise HTTPException(status_code=422, detail=str(e))

    return _respond(PatternMatcherInput(
        text               = parsed.text,
        patterns           = parsed.patterns,
        checkpointInterval = checkpointInterval,
        sampleInterval     = sampleInterval,
    ))

@app.post("/matcher/search")
async def search(request: SearchRequest):
    return _respond(PatternMatcherInput(
        text               = request.text,
        patterns           = request.patterns,
        checkpointInterval = request.checkpointInterval,
        sampleInterval     = request.sampleInterval,
    ))
