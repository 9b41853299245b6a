# src/errors.py
# 클라이언트에게 400으로 돌려줄 에러들. 그 외 예외는 전부 500 처리.


class DiaryError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DiaryError):
    """수정 대상 날짜에 일기가 없음"""


class ProviderError(DiaryError):
    """날씨 API 호출 실패 / 응답 파싱 실패"""


class InvalidRangeError(DiaryError):
    """조회 시작일이 종료일보다 뒤"""
