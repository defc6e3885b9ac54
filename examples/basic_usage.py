#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
onedpath 기본 사용법 예제
"""

import sys
import os

import matplotlib.pyplot as plt

# 패키지 루트를 Python 경로에 추가
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from onedpath import (
    init_trajectory,
    evaluate_all,
    format_constraints,
    format_state,
    move_toward_feasibility,
    move_in_constrained_gradient_dir,
    fixup_constraint,
    create_path_figure,
)


def baseline_example():
    """기준 궤적의 제약 평가 예제"""
    print("=== 기준 궤적 ===")

    traj = init_trajectory()
    errors, gradients = evaluate_all(traj)
    print(format_state(traj))
    print(f"\n최대 제약 오차: {errors.max():g}")
    return traj


def feasibility_example():
    """node 1을 올린 뒤 실현 가능 영역으로 복귀하는 예제"""
    print("\n=== 실현 가능성 복원 ===")

    traj = init_trajectory()
    traj.pos1 = 260.0  # 구간 0의 가속도가 한계를 넘도록

    for step in range(6):
        errors, gradients = evaluate_all(traj)
        print(f"\n[step {step}] 위반 제약 수: {int((errors > 0).sum())}")
        print(format_constraints(errors, gradients))
        move_toward_feasibility(traj)

    return traj


def gradient_example():
    """총 시간을 줄이는 제약 경사 단계 예제"""
    print("\n=== 제약 경사 방향 이동 ===")

    traj = init_trajectory()
    traj.duration0 = traj.duration1 = 5.0

    for step in range(8):
        move_in_constrained_gradient_dir(traj)
        move_toward_feasibility(traj)
        print(f"[step {step}] 총 시간={traj.total_duration:.4f}, vel1={traj.vel1:.4f}")

    return traj


def fixup_example():
    """단일 제약 보정 예제"""
    print("\n=== 단일 제약 보정 ===")

    traj = init_trajectory()
    traj.duration0 -= 0.3
    for i in range(4):
        fixup_constraint(traj, i)
    print(format_state(traj))
    return traj


if __name__ == "__main__":
    baseline_example()
    feasibility_example()
    traj = gradient_example()
    fixup_example()

    fig, _ = create_path_figure(traj)
    plt.show()
