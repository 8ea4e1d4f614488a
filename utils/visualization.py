from config import DisplayConfig


def render_board(grid, cell_width=DisplayConfig.CELL_WIDTH):
    """
    把棋盘渲染成定宽文本表格
    0 显示为空白，每行之间用边框线分隔
    """
    size = len(grid)
    border = "-" * (size * (cell_width + 1) + 1)

    lines = [border]
    for row in grid:
        line = "|"
        for value in row:
            if value == 0:
                line += " " * cell_width + "|"
            else:
                line += f"{int(value):>{cell_width}}|"
        lines.append(line)
        lines.append(border)
    return "\n".join(lines)
