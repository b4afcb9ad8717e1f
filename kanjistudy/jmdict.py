"""
JMdict adapter for kanjistudy.

Turns JMdict `<entry>` elements into WordCandidate objects for the
compound selector. Each kanji writing becomes one variant, paired with the
first reading that applies to it; priority tags come from `ke_pri` (or
`re_pri` for kana-only entries).

JMdict itself is downloaded and stored by the caller; this module only
reads what it is given.
"""

import gzip
import logging
import os
import xml.etree.ElementTree as ET
from typing import IO, Iterable, Iterator, List, Optional, Union

from kanjistudy.models import Variant, WordCandidate

logger = logging.getLogger(__name__)

XML_LANG = '{http://www.w3.org/XML/1998/namespace}lang'


def _texts(elem: ET.Element, tag: str) -> List[str]:
    return [child.text for child in elem.findall(tag) if child.text]


def _reading_for(keb: str, r_eles: List[ET.Element]) -> Optional[str]:
    """Find the first reading that may be written as keb."""
    for r_ele in r_eles:
        reb = r_ele.findtext('reb')
        if not reb or r_ele.find('re_nokanji') is not None:
            continue
        restrictions = _texts(r_ele, 're_restr')
        if restrictions and keb not in restrictions:
            continue
        return reb
    return None


def _english_glosses(entry_elem: ET.Element) -> List[str]:
    glosses = []
    for sense in entry_elem.findall('sense'):
        for gloss in sense.findall('gloss'):
            if gloss.get(XML_LANG, 'eng') == 'eng' and gloss.text:
                glosses.append(gloss.text)
    return glosses


def candidate_from_entry(entry_elem: ET.Element) -> Optional[WordCandidate]:
    """
    Build a WordCandidate from a JMdict entry element.

    Args:
        entry_elem: An `<entry>` element.

    Returns:
        The candidate, or None if the entry has no sequence number or no
        readings.
    """
    seq_text = entry_elem.findtext('ent_seq', '')
    if not seq_text.strip().isdigit():
        logger.debug("Skipping JMdict entry without ent_seq")
        return None
    seq = int(seq_text)

    r_eles = entry_elem.findall('r_ele')
    if not r_eles:
        logger.debug(f"Skipping JMdict entry {seq}: no readings")
        return None

    variants = []
    k_eles = entry_elem.findall('k_ele')
    if k_eles:
        for k_ele in k_eles:
            keb = k_ele.findtext('keb')
            if not keb:
                continue
            reb = _reading_for(keb, r_eles)
            if reb is None:
                continue
            variants.append(Variant(
                written=keb,
                pronounced=reb,
                priorities=_texts(k_ele, 'ke_pri'),
            ))
    else:
        # Kana-only words are written as they are read
        for r_ele in r_eles:
            reb = r_ele.findtext('reb')
            if reb:
                variants.append(Variant(
                    written=reb,
                    pronounced=reb,
                    priorities=_texts(r_ele, 're_pri'),
                ))

    return WordCandidate(variants=variants, glosses=_english_glosses(entry_elem), seq=seq)


def _open_source(path: str) -> IO[bytes]:
    if path.endswith('.gz'):
        return gzip.open(path, 'rb')
    return open(path, 'rb')


def iter_candidates(source: Union[str, os.PathLike, IO[bytes]]) -> Iterator[WordCandidate]:
    """
    Stream candidates from JMdict XML.

    Args:
        source: Path to JMdict XML (plain or .gz) or a binary file object.

    Yields:
        One WordCandidate per well-formed entry, in file order.
    """
    if isinstance(source, (str, os.PathLike)):
        f = _open_source(os.fspath(source))
        close = True
    else:
        f = source
        close = False

    try:
        count = 0
        for _event, elem in ET.iterparse(f, events=('end',)):
            if elem.tag != 'entry':
                continue
            candidate = candidate_from_entry(elem)
            if candidate is not None:
                count += 1
                yield candidate
            # Clear element to save memory
            elem.clear()
        logger.info(f"Read {count} JMdict entries")
    finally:
        if close:
            f.close()


def candidates_containing(candidates: Iterable[WordCandidate], char: str) -> List[WordCandidate]:
    """Keep candidates with at least one variant whose written form contains char."""
    return [
        c for c in candidates
        if any(v.written and char in v.written for v in c.variants)
    ]
