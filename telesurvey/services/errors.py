# telesurvey/services/errors.py
"""
설문 앱 공용 예외
- SurveyValidationError: 필수값 누락/잘못된 선택지 (저장소 호출 없음)
- StoreError: count/read/insert 실패 (네트워크, 저장소 장애, 제약조건 위반)
"""


class SurveyValidationError(Exception):
    def __init__(self, code: str, title: str, description: str):
        super().__init__(description)
        self.code = code
        self.title = title
        self.description = description


class StoreError(Exception):
    def __init__(self, operation: str, detail: str = ""):
        super().__init__(f"{operation} failed: {detail}" if detail else f"{operation} failed")
        self.operation = operation
        self.detail = detail
