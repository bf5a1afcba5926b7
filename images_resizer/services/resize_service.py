"""Уменьшение изображения фильтром 2×2 с прямым отображением координат.

Принципы:
- SRP: только расчёт нового изображения, без ввода-вывода.
- Чистый код: чистая функция от (изображение, коэффициент), без параллелизма внутри.
"""
from __future__ import annotations

import math
from typing import Optional, Tuple

import numpy as np
from PIL import Image

from images_resizer.services.sampler_service import SamplerService


class ResizeService:
    def __init__(self, sampler: Optional[SamplerService] = None) -> None:
        self._sampler = sampler or SamplerService()

    def output_size(self, width: int, height: int, factor: float) -> Tuple[int, int]:
        """Размер результата: (floor(width * factor), floor(height * factor))."""
        return math.floor(width * factor), math.floor(height * factor)

    # ---------- Вспомогательные функции ----------
    def _last_source_index(self, src_len: int, out_len: int, factor: float) -> Tuple[np.ndarray, np.ndarray]:
        """
        Для каждой выходной координаты 0..out_len-1 находит последний индекс исходника,
        который в неё отображается (int(j * factor)).
        Возвращает пару (выходные индексы, исходные индексы) только для попавших координат.
        """
        targets = (np.arange(src_len, dtype=np.float64) * factor).astype(np.int64)
        out_idx = np.arange(out_len, dtype=np.int64)
        # targets не убывает: последнее вхождение = правая граница поиска - 1
        last = np.searchsorted(targets, out_idx, side="right") - 1
        hit = last >= 0
        hit[hit] = targets[last[hit]] == out_idx[hit]
        return out_idx[hit], last[hit]

    # ---------- Основные операции ----------
    def resize_array(self, pixels: np.ndarray, factor: float) -> np.ndarray:
        """
        Обходит пиксели ИСХОДНИКА (строка i, столбец j) и пишет сэмпл (j, i)
        в позицию (int(j * factor), int(i * factor)) результата.
        Записи за пределами результата отбрасываются, при совпадении позиций
        побеждает последний по порядку обхода. Незаписанные пиксели остаются нулевыми.
        """
        if factor <= 0:
            raise ValueError(f"Scaling factor must be positive, got {factor}")
        height, width = pixels.shape[:2]
        out_w, out_h = self.output_size(width, height, factor)
        out = np.zeros((out_h, out_w, 4), dtype=np.uint8)
        if out_w == 0 or out_h == 0:
            return out

        sampled = self._sampler.sample_grid(pixels)
        out_cols, src_cols = self._last_source_index(width, out_w, factor)
        out_rows, src_rows = self._last_source_index(height, out_h, factor)
        out[np.ix_(out_rows, out_cols)] = sampled[np.ix_(src_rows, src_cols)]
        return out

    def resize(self, image: Image.Image, factor: float) -> Image.Image:
        """Возвращает новое RGBA-изображение размера floor(W*f) × floor(H*f).

        Усреднение идёт в предумноженной альфе ("RGBa"): прозрачные соседи
        не вносят свой скрытый цвет в результат.
        """
        premultiplied = image.convert("RGBA").convert("RGBa")
        width, height = premultiplied.size
        pixels = np.frombuffer(premultiplied.tobytes(), dtype=np.uint8).reshape(height, width, 4)
        out = self.resize_array(pixels, factor)
        out_h, out_w = out.shape[:2]
        if out_w == 0 or out_h == 0:
            return Image.new("RGBA", (out_w, out_h))
        return Image.frombytes("RGBa", (out_w, out_h), out.tobytes()).convert("RGBA")
