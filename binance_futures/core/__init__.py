"""
코어 레이어

상수, Enum 타입, 설정 로더, 로깅 설정.
"""
