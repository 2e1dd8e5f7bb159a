"""Built-in seven day routine used whenever an AI-authored plan is unavailable."""
from __future__ import annotations

from lipidcare.domain.schedule import WeeklySchedule

FALLBACK_SCHEDULE_DATA = {
    "weekSchedule": [
        {
            "day": "월요일",
            "theme": "메타 활성 월요일",
            "hourlySchedule": [
                {"time": "06:00", "activity": "따뜻한 레몬수", "category": "general", "details": "기상 후 300ml 섭취", "benefit": "간 해독 지원"},
                {"time": "07:30", "activity": "공복 파워 워킹", "category": "exercise", "details": "30분간 빠르게 걷기", "benefit": "체지방 연소 극대화"},
                {"time": "12:30", "activity": "지중해식 샐러드", "category": "meal", "details": "병아리콩, 아보카도, 올리브유", "benefit": "HDL 콜레스테롤 상승"},
                {"time": "18:30", "activity": "구운 두부와 채소", "category": "meal", "details": "식이섬유 위주의 가벼운 저녁", "benefit": "야간 중성지방 합성 억제"},
                {"time": "22:00", "activity": "정적 스트레칭", "category": "general", "details": "수면 전 이완", "benefit": "숙면 유도"},
            ],
            "dailySummary": {"fastingWindow": "14시간", "intensity": "중강도"},
        },
        {
            "day": "화요일",
            "theme": "오메가-3 화요일",
            "hourlySchedule": [
                {"time": "06:30", "activity": "수분 보충", "category": "general", "details": "물 2컵", "benefit": "혈액 순환 원활"},
                {"time": "12:00", "activity": "고등어 구이", "category": "meal", "details": "등푸른 생선과 쌈채소", "benefit": "중성지방 수치 개선"},
                {"time": "17:00", "activity": "계단 오르기", "category": "exercise", "details": "15분간 하체 강화", "benefit": "인슐린 저항성 개선"},
                {"time": "19:00", "activity": "현미밥과 정갈한 반찬", "category": "meal", "details": "복합 탄수화물 섭취", "benefit": "혈당 스파이크 방지"},
                {"time": "22:30", "activity": "명상", "category": "general", "details": "심신 안정", "benefit": "대사 호르몬 조절"},
            ],
            "dailySummary": {"fastingWindow": "12시간", "intensity": "저강도"},
        },
        {
            "day": "수요일",
            "theme": "근력 강화 수요일",
            "hourlySchedule": [
                {"time": "07:00", "activity": "요가 20분", "category": "exercise", "details": "유연성 및 혈류 개선", "benefit": "전신 순환"},
                {"time": "12:30", "activity": "닭가슴살 샐러드", "category": "meal", "details": "견과류 토핑 추가", "benefit": "단백질 공급"},
                {"time": "15:00", "activity": "견과류 섭취", "category": "general", "details": "아몬드 5알", "benefit": "건강한 지방 섭취"},
                {"time": "19:00", "activity": "연어 스테이크", "category": "meal", "details": "구운 아스파라거스 곁들임", "benefit": "항염 작용"},
                {"time": "21:30", "activity": "반신욕", "category": "general", "details": "체온 조절", "benefit": "노폐물 배출"},
            ],
            "dailySummary": {"fastingWindow": "13시간", "intensity": "중강도"},
        },
        {
            "day": "목요일",
            "theme": "디톡스 목요일",
            "hourlySchedule": [
                {"time": "07:30", "activity": "녹차 한 잔", "category": "general", "details": "항산화 성분 섭취", "benefit": "지방 연소 촉진"},
                {"time": "12:30", "activity": "비빔밥 (보리밥)", "category": "meal", "details": "나물 위주, 고추장 소량", "benefit": "식이섬유 극대화"},
                {"time": "18:00", "activity": "조깅 30분", "category": "exercise", "details": "중강도 유산소", "benefit": "여분 에너지 소비"},
                {"time": "20:00", "activity": "야채 수프", "category": "meal", "details": "따뜻한 채소찜", "benefit": "소화 부담 경감"},
                {"time": "22:00", "activity": "수면 모드", "category": "general", "details": "암막 환경 조성", "benefit": "성장 호르몬 촉진"},
            ],
            "dailySummary": {"fastingWindow": "15시간", "intensity": "고강도"},
        },
        {
            "day": "금요일",
            "theme": "지구력 금요일",
            "hourlySchedule": [
                {"time": "06:30", "activity": "플랭크 3분", "category": "exercise", "details": "코어 근육 강화", "benefit": "기초 대사량 증진"},
                {"time": "12:30", "activity": "해산물 파스타", "category": "meal", "details": "통밀면 사용", "benefit": "느린 탄수화물 흡수"},
                {"time": "15:30", "activity": "블루베리 요거트", "category": "meal", "details": "무가당 요거트", "benefit": "장내 미생물 환경 개선"},
                {"time": "19:00", "activity": "오리 로스구이", "category": "meal", "details": "불포화 지방산", "benefit": "혈관 건강 지원"},
                {"time": "22:00", "activity": "폼롤러 마사지", "category": "general", "details": "근육 뭉침 해소", "benefit": "피로 회복"},
            ],
            "dailySummary": {"fastingWindow": "12시간", "intensity": "중강도"},
        },
        {
            "day": "토요일",
            "theme": "밸런스 토요일",
            "hourlySchedule": [
                {"time": "09:00", "activity": "늦은 아침 산책", "category": "exercise", "details": "가족과 함께 걷기", "benefit": "스트레스 해소"},
                {"time": "13:00", "activity": "콩국수", "category": "meal", "details": "콩 단백질 듬뿍", "benefit": "저지방 고단백"},
                {"time": "16:00", "activity": "취미 활동", "category": "general", "details": "적극적인 휴식", "benefit": "정서적 안정"},
                {"time": "18:30", "activity": "샤브샤브", "category": "meal", "details": "채소 위주의 식사", "benefit": "포만감 유지"},
                {"time": "21:00", "activity": "독서", "category": "general", "details": "디지털 디톡스", "benefit": "뇌 휴식"},
            ],
            "dailySummary": {"fastingWindow": "14시간", "intensity": "저강도"},
        },
        {
            "day": "일요일",
            "theme": "리프레시 일요일",
            "hourlySchedule": [
                {"time": "08:30", "activity": "충분한 수면", "category": "general", "details": "신체 회복 시간", "benefit": "컨디션 조절"},
                {"time": "12:30", "activity": "브런치 (오믈렛)", "category": "meal", "details": "시금치와 버섯 추가", "benefit": "영양 균형"},
                {"time": "15:00", "activity": "등산 또는 하이킹", "category": "exercise", "details": "자연 속 운동", "benefit": "심폐 기능 강화"},
                {"time": "18:00", "activity": "해조류 샐러드", "category": "meal", "details": "미역, 다시마 등", "benefit": "중성지방 배출 도움"},
                {"time": "21:00", "activity": "주간 피드백", "category": "general", "details": "다음 주 계획 수립", "benefit": "목표 의식 고취"},
            ],
            "dailySummary": {"fastingWindow": "16시간", "intensity": "중강도"},
        },
    ],
    "weeklyGuidelines": {
        "dietaryPrinciples": [
            "정제 탄수화물(밀가루, 설탕) 90% 제한",
            "액상과당 포함 음료 전면 배제",
            "음주 횟수 주 1회 미만으로 제한",
        ],
        "expectedProgress": "4주 내 수치 15-20% 감소 예상",
    },
}

# Models are frozen, so one validated instance can be shared by every session.
FALLBACK_SCHEDULE = WeeklySchedule.model_validate(FALLBACK_SCHEDULE_DATA)


def fallback_schedule() -> WeeklySchedule:
    """Return the built-in routine."""
    return FALLBACK_SCHEDULE
