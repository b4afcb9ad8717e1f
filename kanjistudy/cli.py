"""
Command line interface for kanjistudy.

Usage:
    python -m kanjistudy.cli furigana "[電車|でんしゃ]に乗る"
    python -m kanjistudy.cli compounds --anchor 車 --meaning car words.json
    python -m kanjistudy.cli compounds --anchor 車 data/JMdict_e.xml.gz
    python -m kanjistudy.cli card request.json
"""

import argparse
import json
import logging
import sys
import xml.etree.ElementTree as ET
from typing import Any, List, Optional, Tuple

from pydantic import ValidationError

from kanjistudy import __version__
from kanjistudy.characters import validate_kanji_query
from kanjistudy.compounds import select
from kanjistudy.errors import InvalidRequestError, KanjiNotFoundError, KanjiStudyError
from kanjistudy.furigana import segment, segments_to_plain, segments_to_reading
from kanjistudy.jmdict import candidates_containing, iter_candidates
from kanjistudy.lookup import build_study_card
from kanjistudy.models import KanjiInfo, WordCandidate
from kanjistudy.settings import DEBUG

logger = logging.getLogger(__name__)


def _read_json(path: str) -> Any:
    if path == '-':
        return json.load(sys.stdin)
    with open(path, encoding='utf-8') as f:
        return json.load(f)


def _print_json(data: Any):
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _load_candidates(path: str, anchor: str) -> List[WordCandidate]:
    """Read candidates from a JSON list or a JMdict XML file."""
    if path.endswith(('.xml', '.xml.gz')):
        return candidates_containing(iter_candidates(path), anchor)
    return _parse_candidates(_read_json(path))


def _require_list(value: Any, name: str) -> list:
    if not isinstance(value, list):
        raise InvalidRequestError(f'{name} must be a JSON list')
    return value


def _parse_candidates(raw: Any) -> List[WordCandidate]:
    return [WordCandidate.model_validate(c) for c in _require_list(raw, 'candidates')]


def _parse_sentences(raw: Any) -> List[Tuple[str, Optional[str]]]:
    """Read [transcription, translation] pairs; the translation is optional."""
    sentences = []
    for i, item in enumerate(_require_list(raw, 'sentences')):
        if not isinstance(item, list) or not item or not isinstance(item[0], str):
            raise InvalidRequestError(
                f'sentences[{i}] must be a [transcription, translation] list'
            )
        sentences.append((item[0], item[1] if len(item) > 1 else None))
    return sentences


def furigana_command(args) -> int:
    """Parse bracket-annotated text."""
    text = ' '.join(args.text)
    segments = segment(text)

    if args.plain:
        print(segments_to_plain(segments))
    elif args.reading:
        print(segments_to_reading(segments))
    else:
        _print_json([s.to_dict() for s in segments])
    return 0


def compounds_command(args) -> int:
    """Select compounds for an anchor kanji."""
    validate_kanji_query(args.anchor)
    candidates = _load_candidates(args.file, args.anchor)
    logger.info(f"Loaded {len(candidates)} candidates for {args.anchor}")

    meaning = args.meaning.lower() if args.meaning else None
    compounds = select(candidates, args.anchor, meaning, limit=args.limit)
    _print_json([c.model_dump() for c in compounds])
    return 0


def card_command(args) -> int:
    """Compose a study card from a JSON request."""
    request = _read_json(args.file)
    if not isinstance(request, dict):
        raise InvalidRequestError('card request must be a JSON object')
    kanji = validate_kanji_query(request.get('kanji'))

    info = KanjiInfo.model_validate(request.get('info') or {'query': kanji, 'found': False})
    if not info.found:
        raise KanjiNotFoundError(kanji)

    candidates = _parse_candidates(request.get('candidates', []))
    sentences = _parse_sentences(request.get('sentences', []))

    card = build_study_card(kanji, info, candidates, sentences)
    _print_json(card.to_dict())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Furigana parsing and compound selection for kanji study cards',
        prog='kanjistudy',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log progress to stderr',
    )

    subparsers = parser.add_subparsers(dest='command')

    furigana = subparsers.add_parser('furigana', help='Parse [base|reading] annotated text')
    furigana.add_argument('text', nargs='+', help='Annotated text')
    mode = furigana.add_mutually_exclusive_group()
    mode.add_argument('--plain', action='store_true', help='Print text without annotations')
    mode.add_argument('--reading', action='store_true', help='Print the reading in kana')
    furigana.set_defaults(func=furigana_command)

    compounds = subparsers.add_parser('compounds', help='Select compound words for a kanji')
    compounds.add_argument('file', help='JSON list of candidates, JMdict XML, or - for stdin')
    compounds.add_argument('--anchor', '-a', required=True, help='Kanji the compounds must contain')
    compounds.add_argument('--meaning', '-m', default=None, help="The kanji's own primary meaning")
    compounds.add_argument(
        '--limit', '-l',
        type=int,
        default=5,
        metavar='N',
        help='Return at most N compounds (default: 5)',
    )
    compounds.set_defaults(func=compounds_command)

    card = subparsers.add_parser('card', help='Compose a study card from a JSON request')
    card.add_argument('file', help='JSON request with kanji, info, candidates, sentences')
    card.set_defaults(func=card_command)

    return parser


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    parsed = parser.parse_args(args)

    if parsed.version:
        print(f'kanjistudy {__version__}')
        return 0

    if parsed.verbose or DEBUG:
        level = logging.DEBUG if DEBUG else logging.INFO
        logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')

    if not getattr(parsed, 'func', None):
        parser.print_help()
        return 1

    try:
        return parsed.func(parsed)
    except KanjiStudyError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    except (OSError, json.JSONDecodeError, ET.ParseError, ValidationError) as e:
        print(f'Error reading input: {e}', file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
