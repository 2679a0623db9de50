"""List the file types the context API can parse."""

from fastapi import APIRouter

from ..models import LanguageInfo
from ..tree.languages import EXTENSION_LANGUAGES, FILENAME_LANGUAGES

router = APIRouter(prefix="/api", tags=["Languages"])


@router.get("/languages", response_model=list[LanguageInfo])
async def list_languages():
    """Extensions (and exact filenames) mapped to their grammar."""
    entries = [
        LanguageInfo(extension=ext, language=lang)
        for ext, lang in sorted(EXTENSION_LANGUAGES.items())
    ]
    entries.extend(
        LanguageInfo(extension=name, language=lang)
        for name, lang in sorted(FILENAME_LANGUAGES.items())
    )
    return entries
