"""
onedpath 사용 예제들

포함된 예제들:
- basic_usage.py: 기준 궤적 평가, 제약 보고서, 각 솔버 단계 데모

실행 방법:
    python examples/basic_usage.py
"""

__all__ = []
