"""Form choices and the achievement-standard lists offered to the AI.

The standard lists are a small sample keyed by subject then grade level;
subjects without an entry get a "no data" message instead of suggestions.
"""
from typing import Dict, List

GRADE_LEVELS: List[str] = [
	"유치원",
	"초등학교 (1-2학년)",
	"초등학교 (3-4학년)",
	"초등학교 (5-6학년)",
	"중학교 (1-3학년)",
	"고등학교 (1-3학년)",
	"대학교",
]

SEMESTERS: List[str] = [
	"1학기",
	"2학기",
]

SUBJECTS: List[str] = [
	"국어",
	"수학",
	"바른 생활",
	"슬기로운 생활",
	"즐거운 생활",
	"안전한 생활",
	"통합교과",
	"사회",
	"도덕",
	"과학",
	"실과",
	"체육",
	"음악",
	"미술",
	"영어",
	"창의적 체험활동",
]

SPECIAL_NEEDS_SUGGESTIONS: List[str] = [
	"경계선 지능 학생",
	"읽기 부진 학생",
	"ADHD 성향 학생",
	"자폐 스펙트럼 학생",
	"정서·행동장애 학생",
	"학습장애 학생",
]

ACHIEVEMENT_STANDARDS: Dict[str, Dict[str, List[str]]] = {
	"과학": {
		"초등학교 (3-4학년)": [
			"[4과04-01]물이 얼 때와 얼음이 녹을 때의 무게와 부피 변화를 관찰할 수 있다.",
			"[4과04-02]물이 증발하고 끓을 때의 변화를 관찰하고, 물의 상태 변화가 우리 생활에 이용되는 예를 찾을 수 있다.",
			"[4과04-03]차가운 물체의 표면에서 일어나는 응결 현상을 관찰할 수 있다.",
			"[4과05-01]물이 여러 가지 상태로 변하며 순환하는 과정을 설명할 수 있다.",
			"[4과05-02]물의 중요성을 알고 물을 효율적으로 이용하는 방법을 토의할 수 있다.",
		],
		"초등학교 (5-6학년)": [
			"[6과01-01]온도계를 사용하여 물체의 온도를 측정하고, 온도의 의미를 설명할 수 있다.",
			"[6과01-02]온도가 다른 두 물체를 접촉하여 온도가 같아지는 현상을 관찰하고, 열의 이동을 설명할 수 있다.",
			"[6과03-01]여러 가지 물질을 용해하는 실험을 통해 용해 현상을 관찰할 수 있다.",
		],
	},
	"수학": {
		"초등학교 (3-4학년)": [
			"[4수01-01]10000 이상의 큰 수에 대한 자릿값과 위치적 기수법을 이해하고, 수를 읽고 쓸 수 있다.",
			"[4수01-10]분모가 같은 분수의 덧셈과 뺄셈의 계산 원리를 이해하고 그 계산을 할 수 있다.",
			"[4수02-01]직선, 선분, 반직선을 알고 구별할 수 있다.",
		],
	},
	"국어": {
		"초등학교 (3-4학년)": [
			"[4국01-01]대화의 즐거움을 알고 대화를 나눈다.",
			"[4국02-01]문단과 글의 중심 생각을 파악한다.",
			"[4국03-01]중심 문장과 뒷받침 문장을 갖추어 문단을 쓴다.",
		],
	},
}


def standards_for(subject: str, grade_level: str) -> List[str]:
	return ACHIEVEMENT_STANDARDS.get(subject, {}).get(grade_level, [])
