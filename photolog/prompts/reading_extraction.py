"""
측정값 추출용 프롬프트.

분석기 화면 사진에서 시간/값 쌍을 JSON 배열로 뽑아낼 때 비전 모델에 보내는 프롬프트.
"""

from photolog.services.identifiers.vocabulary import TN_TP_ITEM

READING_PROMPT_HEADER = "제공된 측정 장비의 이미지를 분석해주세요.\n컨텍스트:"

TN_TP_ITEM_SECTION = """
- 항목/파라미터: TN 및 TP. 이미지에서 TN 및 TP 각각의 시간 및 값 쌍을 추출해주세요.
  "value_tn" (TN 값) 및 "value_tp" (TP 값) 필드를 사용하세요.
  각 값 필드에는 이미지에서 추출한 **순수한 숫자 값만** 포함해주세요. 예를 들어, 이미지에 "N 5.388 mgN/L 저"라고 표시되어 있다면 "value_tn"에는 "5.388"만 와야 합니다.
  항목 지시자(예: "N ", "P "), 단위(예: "mgN/L"), 텍스트 주석(예: "[M_]", "(A)", "저", "고 S") 등은 **모두 제외**해야 합니다.

JSON 출력 형식 예시 (항목: TN/TP):
[
  { "time": "2025/04/23 05:00", "value_tn": "46.2", "value_tp": "1.2" },
  { "time": "2025/04/23 06:00", "value_tn": "5.388", "value_tp": "0.1" },
  { "time": "2025/05/21 09:38", "value_tn": "89.629" }
]"""

SINGLE_ITEM_SECTION = """
- 항목/파라미터: {item}. 이 항목의 측정값을 이미지에서 추출해주세요.
  "value" 필드에는 각 측정 항목의 **순수한 숫자 값만** 포함해야 합니다. 예를 들어, 이미지에 "N 89.629 mgN/L [M_]"라고 표시되어 있다면 "value"에는 "89.629"만 와야 합니다.
  항목 지시자(예: "N ", "TOC "), 단위(예: "mgN/L", "mg/L"), 상태 또는 주석(예: "[M_]", "(A)") 등은 **모두 제외**해야 합니다.

JSON 출력 형식 예시 (항목: {item}):
{example}"""

SINGLE_ITEM_EXAMPLES = {
    "TN": """[
  { "time": "2025/05/21 09:38", "value": "89.629" },
  { "time": "2025/05/21 10:25", "value": "44.978" },
  { "time": "2025/05/21 12:46", "value": "6.488" }
]""",
    "TP": """[
  { "time": "YYYY/MM/DD HH:MM", "value": "X.XXX" }
]""",
}

GENERIC_EXAMPLE = """[
  { "time": "YYYY/MM/DD HH:MM", "value": "X.XXX" },
  { "time": "YYYY/MM/DD HH:MM", "value": "Y.YYY" }
]"""

NO_CONTEXT_NOTE = "\n- 특정 접수번호, 현장 위치 또는 항목이 제공되지 않았습니다. 일반적으로 시간/값 쌍을 분석합니다."

READING_PROMPT_INSTRUCTIONS = """

작업:
이미지에서 데이터 테이블이나 목록을 식별해주세요.
장치 화면에 보이는 모든 "Time"(시각) 및 관련 값 쌍을 추출해주세요.

JSON 출력 및 데이터 추출을 위한 특정 지침:
1.  전체 응답은 **반드시** 유효한 단일 JSON 배열이어야 합니다. 응답은 대괄호 '['로 시작해서 대괄호 ']'로 끝나야 하며, 이 배열 구조 외부에는 **어떠한 다른 텍스트도 포함되어서는 안 됩니다.**
2.  JSON 데이터 자체를 제외하고는, 마크다운 구분 기호, 소개, 설명, 주석 또는 기타 텍스트를 **절대로 포함하지 마세요.**
3.  배열 내의 각 JSON 객체는 정확한 JSON 형식이어야 합니다. 속성 값 뒤에는 쉼표(,) 또는 닫는 중괄호(})만 와야 합니다.
4.  지정된 "항목/파라미터" 관련 데이터를 우선적으로 추출하되, 장치 화면에서 식별 가능한 모든 "Time"(시각) 및 관련 값 쌍을 반드시 추출해야 합니다.
5.  "Time"(시각): 해당 시간 값 바로 옆이나 매우 근접한 위치에 명확하게 연관된 날짜가 표시된 경우에만 날짜를 포함하세요. 시간만 명확히 표시된 경우 "HH:MM" 또는 "HH:MM:SS"로, 날짜와 시간이 함께 표시된 경우 "YYYY/MM/DD HH:MM" 형식으로 추출하세요.
6.  값 필드 ("value", "value_tn", "value_tp"): **오직 숫자 부분만** 추출해주세요. 숫자 값을 명확히 식별할 수 없다면 해당 값 필드를 생략하거나 빈 문자열 ""로 설정해주세요.
7.  항목이 "TN/TP"인 경우 각 객체는 "time"을 포함하고, TN 데이터가 있으면 "value_tn", TP 데이터가 있으면 "value_tp"를 포함합니다. 한 값만 있으면 해당 값만 포함합니다.
8.  카메라에서 생성된 타임스탬프 및 UI 버튼 텍스트는 실제 데이터의 일부가 아닌 한 제외하세요.
9.  "Time" 및 관련 값 쌍을 전혀 찾을 수 없으면 빈 JSON 배열([])을 반환하세요.
10. "reactors_input" 또는 "reactors_output" 또는 유사한 마커를 응답에 포함하지 마세요.
"""


def build_reading_prompt(
    receipt_number: str | None = None,
    site_location: str | None = None,
    item: str | None = None,
) -> str:
    """측정값 추출용 프롬프트를 구성합니다.

    Parameters
    ----------
    receipt_number : str | None
        접수번호
    site_location : str | None
        현장/위치
    item : str | None
        분석 항목 (예: "TOC", "TN", "TN/TP")

    Returns
    -------
    str
        비전 모델에 보낼 프롬프트
    """
    prompt = READING_PROMPT_HEADER
    if receipt_number:
        prompt += f"\n- 접수번호: {receipt_number}"
    if site_location:
        prompt += f"\n- 현장/위치: {site_location}"

    if item == TN_TP_ITEM:
        prompt += TN_TP_ITEM_SECTION
    elif item:
        example = SINGLE_ITEM_EXAMPLES.get(item, GENERIC_EXAMPLE)
        prompt += SINGLE_ITEM_SECTION.format(item=item, example=example)

    if not receipt_number and not site_location and not item:
        prompt += NO_CONTEXT_NOTE

    return prompt + READING_PROMPT_INSTRUCTIONS
