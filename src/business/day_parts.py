"""
Day-part partitioning of a location's 24-hour cycle
"""
from bisect import bisect_right
from dataclasses import dataclass
from datetime import datetime, time, tzinfo
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Union

from src.models.catalog import DayPart
from .errors import (
    CoverageGapError, CoverageOverlapError, DuplicateEntityError, InvalidDayPartError
)

DAY_LENGTH = 24 * 60 * 60 * 1_000_000  # микросекунды

Instant = Union[datetime, time]


def to_offset(moment: time) -> int:
    """Время суток -> микросекунды от полуночи"""
    return ((moment.hour * 60 + moment.minute) * 60 + moment.second) * 1_000_000 + moment.microsecond


def from_offset(offset: int) -> time:
    """Микросекунды от полуночи -> время суток (24:00 становится 00:00)"""
    offset %= DAY_LENGTH
    seconds, micro = divmod(offset, 1_000_000)
    minutes, second = divmod(seconds, 60)
    hour, minute = divmod(minutes, 60)
    return time(hour, minute, second, micro)


def time_of_day(instant: Instant, tz: Optional[tzinfo] = None) -> time:
    """
    Отбрасывает дату.

    Aware datetime сначала переводится в tz локации (если задан),
    naive datetime считается местным временем.
    Время суток с tzinfo не принимается: без даты его нельзя перевести в tz локации.
    """
    if isinstance(instant, datetime):
        if tz is not None and instant.tzinfo is not None:
            instant = instant.astimezone(tz)
        return instant.time()
    if instant.tzinfo is not None:
        raise ValueError("time-of-day instants must be naive local times; pass an aware datetime instead")
    return instant


@dataclass(frozen=True)
class _Segment:
    start: int
    end: int
    day_part: DayPart


def _segments(day_part: DayPart) -> List[_Segment]:
    """Разбивает интервал на отрезки без перехода через полночь"""
    if day_part.is_full_cycle:
        return [_Segment(0, DAY_LENGTH, day_part)]
    if day_part.start == day_part.end:
        raise InvalidDayPartError(day_part.name, day_part.start)

    start, end = to_offset(day_part.start), to_offset(day_part.end)
    if start < end:
        return [_Segment(start, end, day_part)]

    segments = [_Segment(start, DAY_LENGTH, day_part)]
    if end > 0:
        segments.append(_Segment(0, end, day_part))
    return segments


def _sorted_segments(day_parts: Sequence[DayPart]) -> List[_Segment]:
    seen = set()
    segments = []
    for day_part in day_parts:
        if day_part.name in seen:
            raise DuplicateEntityError("day part", day_part.name)
        seen.add(day_part.name)
        segments.extend(_segments(day_part))
    return sorted(segments, key=lambda s: (s.start, s.end))


def _sweep(segments: List[_Segment]) -> None:
    """Проход слева направо по отсортированным границам"""
    if not segments:
        return

    cursor = 0
    owner: Optional[DayPart] = None
    for segment in segments:
        if segment.start > cursor:
            if cursor == 0:
                # Непокрытый хвост суток продолжает начальный пробел
                covered_until = max(s.end for s in segments)
                if covered_until < DAY_LENGTH:
                    raise CoverageGapError(from_offset(covered_until), from_offset(segment.start))
            raise CoverageGapError(from_offset(cursor), from_offset(segment.start))
        if segment.start < cursor:
            raise CoverageOverlapError(
                from_offset(segment.start),
                from_offset(min(cursor, segment.end)),
                owner.name,
                segment.day_part.name
            )
        cursor = segment.end
        owner = segment.day_part

    if cursor < DAY_LENGTH:
        raise CoverageGapError(from_offset(cursor), from_offset(DAY_LENGTH))


def validate_day_parts(day_parts: Iterable[DayPart]) -> None:
    """
    Проверка предлагаемого набора частей дня перед сохранением.

    Пустой набор допустим. Иначе объединение интервалов должно покрывать
    сутки без пробелов и пересечений.

    Raises:
        CoverageGapError: участок суток не покрыт
        CoverageOverlapError: две части дня пересекаются
        InvalidDayPartError: пустой интервал [t, t) при t != 00:00
        DuplicateEntityError: повтор имени части дня
    """
    _sweep(_sorted_segments(list(day_parts)))


class DayPartSet:
    """Проверенное разбиение суток локации на части дня"""

    def __init__(self, day_parts: Iterable[DayPart] = (), tz: Optional[tzinfo] = None):
        self._day_parts = tuple(day_parts)
        self._tz = tz

        segments = _sorted_segments(self._day_parts)
        _sweep(segments)

        self._segments = segments
        self._starts = [s.start for s in segments]
        self._by_name: Dict[str, DayPart] = {dp.name: dp for dp in self._day_parts}

    def __len__(self) -> int:
        return len(self._day_parts)

    def __iter__(self) -> Iterator[DayPart]:
        return iter(self._day_parts)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def get(self, name: str) -> Optional[DayPart]:
        """Часть дня по имени"""
        return self._by_name.get(name)

    def active_day_part(self, instant: Instant) -> Optional[DayPart]:
        """Часть дня, содержащая момент; None если частей дня нет"""
        if not self._segments:
            return None

        offset = to_offset(time_of_day(instant, self._tz))
        index = bisect_right(self._starts, offset) - 1
        return self._segments[index].day_part
