"""Сэмплер: усреднение 2×2 с прижатием координат к границам изображения.

Принципы:
- SRP: считает цвет одного выходного пикселя и ничего больше.
- Чистый код: скалярная и векторизованная версии дают одинаковый результат.
"""
from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

Color = Tuple[int, int, int, int]

# 8-бит -> 16-бит: v * 257 (0xFF -> 0xFFFF)
_WIDEN = 257
# сумма четырёх 16-битных отсчётов -> одно 8-битное значение (4 * 256)
_DIVISOR = 1024


class SamplerService:
    def clamp(self, x: int, y: int, width: int, height: int) -> Tuple[int, int]:
        """Прижимает x к [0, width-1] и y к [0, height-1] независимо по осям."""
        if x < 0:
            x = 0
        elif x > width - 1:
            x = width - 1
        if y < 0:
            y = 0
        elif y > height - 1:
            y = height - 1
        return x, y

    def average_2x2(self, c00: Sequence[int], c01: Sequence[int], c10: Sequence[int], c11: Sequence[int]) -> Color:
        """
        Средний RGBA-цвет блока 2×2.
        Каналы расширяются до 16 бит, сумма делится на 1024 с отбрасыванием дробной части.
        """
        out = []
        for ch in range(4):
            total = (int(c00[ch]) + int(c01[ch]) + int(c10[ch]) + int(c11[ch])) * _WIDEN
            out.append(total // _DIVISOR)
        return out[0], out[1], out[2], out[3]

    def sample(self, pixels: np.ndarray, x: int, y: int) -> Color:
        """
        Цвет для позиции (x, y) исходника: среднее пикселей (x, y), (x+1, y), (x, y+1), (x+1, y+1)
        с прижатием к краям.
        """
        height, width = pixels.shape[:2]
        x0, y0 = self.clamp(x, y, width, height)
        x1, y1 = self.clamp(x + 1, y + 1, width, height)
        return self.average_2x2(pixels[y0, x0], pixels[y0, x1], pixels[y1, x0], pixels[y1, x1])

    def sample_grid(self, pixels: np.ndarray) -> np.ndarray:
        """
        Векторизованный `sample` для всех позиций исходника сразу.
        Возвращает массив uint8 той же формы (H, W, 4).
        """
        height, width = pixels.shape[:2]
        if height == 0 or width == 0:
            return np.zeros((height, width, 4), dtype=np.uint8)
        # Паддинг повтором края == clamp справа и снизу
        p = np.pad(pixels.astype(np.uint32), ((0, 1), (0, 1), (0, 0)), mode="edge")
        total = p[:-1, :-1] + p[:-1, 1:] + p[1:, :-1] + p[1:, 1:]
        return (total * _WIDEN // _DIVISOR).astype(np.uint8)
