#!/usr/bin/env python3
"""
2048 文本版游戏主入口文件
使用方法:
    python run.py play      # 开始游戏
    python run.py replay    # 回放游戏记录
    python run.py help      # 显示帮助信息
"""

import sys
import argparse
from pathlib import Path

# 添加项目根目录到Python路径
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from ManControl import TextGame
from config import PathConfig


def play_mode(seed=None, mode=None, record=False):
    """游戏模式"""
    print("=" * 40)
    print("2048 - text mode")
    print("=" * 40)

    game = TextGame(seed=seed, difficulty=mode, record=record)
    game.play()
    return 0


def replay_mode(log_file):
    """回放模式"""
    if log_file is None:
        print("Error: no game log given.")
        print(f"Pass a file path, or a file name inside {PathConfig.LOG_DIR}/")
        return 1

    try:
        ok = TextGame().replay(log_file)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1
    return 0 if ok else 1


def show_help():
    """显示帮助信息"""
    help_text = f"""
2048 文本版游戏

使用方法:
    python run.py <命令> [选项]

命令:
    play                开始游戏
    replay <log_file>   回放游戏记录
    help                显示此帮助信息

选项 (play):
    --seed N            随机种子(不指定时从输入读取)
    --mode E|M|H        难度: Easy(256) / Medium(512) / Hard(1024)
    --record            结束时保存游戏记录

示例:
    python run.py play                       # 交互式选择种子和难度
    python run.py play --seed 7 --mode M     # 指定种子和难度
    python run.py play --record              # 保存记录到 {PathConfig.LOG_DIR}/
    python run.py replay 2048_seed7_20240101_120000.json

操作:
    U/D/L/R 移动(不区分大小写), Q 退出
    """
    print(help_text)


def main(argv=None):
    """主函数"""
    parser = argparse.ArgumentParser(description="2048 文本版游戏", add_help=False)
    parser.add_argument('command', nargs='?', default='help',
                        choices=['play', 'replay', 'help'],
                        help='要执行的命令')
    parser.add_argument('log_file', nargs='?', default=None,
                        help='游戏记录文件(用于replay命令)')
    parser.add_argument('--seed', type=int, default=None,
                        help='随机种子')
    parser.add_argument('--mode', default=None,
                        choices=['E', 'M', 'H'],
                        help='难度')
    parser.add_argument('--record', action='store_true',
                        help='保存游戏记录')

    args = parser.parse_args(argv)

    if args.command == 'play':
        return play_mode(args.seed, args.mode, args.record)
    elif args.command == 'replay':
        return replay_mode(args.log_file)
    show_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
