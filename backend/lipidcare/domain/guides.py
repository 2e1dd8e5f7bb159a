"""Static care guidance shown alongside the routine."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class CareGuide:
    icon: str
    title: str
    description: str


CARE_GUIDES: List[CareGuide] = [
    CareGuide(
        icon="droplets",
        title="수분 섭취 가이드",
        description="하루 2L 이상의 미온수는 혈액 농도를 조절하고 대사를 돕습니다.",
    ),
    CareGuide(
        icon="dumbbell",
        title="효율적인 운동법",
        description="유산소와 근력 운동의 황금 비율은 7:3입니다. 식후 1시간 뒤를 노리세요.",
    ),
    CareGuide(
        icon="sparkles",
        title="영양제 매칭",
        description="오메가-3와 코큐텐은 중성지방 수치 개선에 시너지를 냅니다.",
    ),
]

EXPERT_NOTE = "중성지방은 식습관 변화만으로도 4주 내에 드라마틱한 변화를 보일 수 있는 항목입니다. 포기하지 마세요."
