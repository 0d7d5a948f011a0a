import asyncio
import logging
from typing import List, Literal

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from domaintwist.models.dictionary import Dictionary
from domaintwist.models.engine_selection import Engine, EngineSelection
from domaintwist.models.variation_request import VariationRequest
from domaintwist.services.dictionary_loader import DictionaryLoadError, load_dictionary_from_url
from domaintwist.services.format import Format
from domaintwist.services.fuzzer import Fuzzer, twist_domain
from domaintwist.services.url_parser import UrlParser

router = APIRouter()

logger = logging.getLogger(__name__)


def _render(permutations, output_format: str):
    if output_format == "csv":
        return PlainTextResponse(Format(permutations).csv(), media_type="text/csv")
    if output_format == "list":
        return PlainTextResponse(Format(permutations).list())
    return permutations


def _run_fuzzer(domain: str, selection: EngineSelection, unicode: bool = False, valid_only: bool = False):
    fuzz = Fuzzer(UrlParser(domain).domain)
    fuzz.generate(selection)
    logger.debug("Fuzzer generated domains count: %d", len(fuzz.domains))
    return fuzz.permutations(unicode=unicode, valid_only=valid_only)


# Engine catalog, in the order the orchestrator runs them
@router.get("/engines")
async def list_engines() -> List[str]:
    return [engine.value for engine in Engine]


# Endpoint for full variation generation
@router.post("/variations/{domain}")
async def variations(domain: str, output_format: Literal["json", "csv", "list"] = "json"):
    try:
        permutations = await asyncio.to_thread(_run_fuzzer, domain, EngineSelection())
        return _render(permutations, output_format)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Internal server error: %s", str(e))
        raise HTTPException(status_code=500, detail=str(e))


# Endpoint for variation generation with engine selection and custom dictionaries
@router.post("/variations")
async def variations_with_options(request: VariationRequest):
    try:
        custom_dictionary = None
        if request.dictionary is not None:
            custom_dictionary = Dictionary.from_mapping(request.dictionary)
        elif request.dictionary_url:
            # The dictionary must be fully loaded before any engine runs
            custom_dictionary = await asyncio.to_thread(load_dictionary_from_url, request.dictionary_url)

        selection = EngineSelection(engines=request.engines, custom_dictionary=custom_dictionary)
        permutations = await asyncio.to_thread(
            _run_fuzzer, request.domain, selection, request.unicode, request.valid_only
        )
        return _render(permutations, request.output_format)
    except DictionaryLoadError as e:
        logger.warning("Dictionary load failed: %s", e)
        raise HTTPException(status_code=502, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Internal server error: %s", str(e))
        raise HTTPException(status_code=500, detail=str(e))


# Endpoint for the lightweight twist
@router.post("/twist/{domain}")
async def twist(domain: str, tld_swap: bool = True):
    try:
        return twist_domain(UrlParser(domain).domain, include_tld_swap=tld_swap)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Internal server error: %s", str(e))
        raise HTTPException(status_code=500, detail=str(e))
