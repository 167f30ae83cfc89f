"""
Shape Mosaic — Gallery Edition

Run with:
    streamlit run streamlit_app.py
"""

from __future__ import annotations

import time

import streamlit as st
from PIL import Image, ImageOps

from shape_mosaic.builder import build_mosaic
from shape_mosaic.config import SHAPES, MosaicConfig
from shape_mosaic.errors import MosaicError
from shape_mosaic.image_io import decode_image, mosaic_filename

# -- Page config -------------------------------------------------------
st.set_page_config(
    page_title="Shape Mosaic",
    page_icon=None,
    layout="wide",
    initial_sidebar_state="collapsed",
)

_DEFAULTS = MosaicConfig()

_SHAPE_LABELS = {
    "square": "Square",
    "circle": "Circle",
    "smoothcircle": "Smooth circle",
    "star": "Star",
}

# -- CSS ---------------------------------------------------------------
st.markdown("""
<style>
    .gallery-title {
        font-family: 'Cormorant Garamond', 'Georgia', serif;
        font-size: 2.8rem;
        font-weight: 300;
        letter-spacing: 0.06em;
        text-align: center;
        color: #1a1a1a;
        border-bottom: 1px solid #1a1a1a;
        padding-bottom: 0.6rem;
        margin-bottom: 0.5rem;
    }
    .gallery-subtitle {
        font-size: 0.75rem;
        font-weight: 300;
        line-height: 1.8;
        margin-bottom: 3.5rem;
    }
    .slider-desc {
        font-family: 'Cormorant Garamond', 'Georgia', serif;
        font-size: 0.95rem;
        font-style: italic;
        color: #6a6a64;
        margin-top: -0.5rem;
        margin-bottom: 1rem;
    }
    .catalogue-detail {
        font-size: 0.75rem;
        letter-spacing: 0.08em;
        text-transform: uppercase;
        text-align: center;
        margin-bottom: 2rem;
    }
    .stButton > button, .stDownloadButton > button {
        background-color: #2a2a2a !important;
        color: #faf9f6 !important;
        border: 1px solid #2a2a2a !important;
        border-radius: 0px !important;
        letter-spacing: 0.10em;
        text-transform: uppercase;
        font-size: 0.6rem;
    }
</style>
""", unsafe_allow_html=True)


# -- Helpers -----------------------------------------------------------

def _add_passepartout(img: Image.Image, border: int = 20) -> Image.Image:
    return ImageOps.expand(img, border=border, fill=(250, 249, 246))


# -- Title -------------------------------------------------------------
st.markdown(
    '<div class="gallery-title">Shape Mosaic</div>',
    unsafe_allow_html=True,
)
st.markdown(
    '<div class="gallery-subtitle">'
    "Upload an image and it is redrawn as a grid of shapes. The image is "
    "sampled every few pixels and each sample becomes one square, circle, "
    "smooth circle or star in that colour. Export the result as a PNG."
    "</div>",
    unsafe_allow_html=True,
)

# -- Controls ----------------------------------------------------------
shape = st.selectbox(
    "Shape", SHAPES,
    index=SHAPES.index(_DEFAULTS.shape),
    format_func=lambda s: _SHAPE_LABELS[s],
)

ctrl1, ctrl2, ctrl3 = st.columns(3)
with ctrl1:
    stride = st.slider("Stride (px)", 2, 100, _DEFAULTS.sample_stride)
    st.markdown(
        '<div class="slider-desc">'
        "Distance between sample points in the source. Smaller values give "
        "more shapes and more detail."
        "</div>",
        unsafe_allow_html=True,
    )
with ctrl2:
    size = st.slider("Shape size (px)", 2, 100, _DEFAULTS.shape_size)
    st.markdown(
        '<div class="slider-desc">Footprint of every shape in the output.</div>',
        unsafe_allow_html=True,
    )
with ctrl3:
    margin = st.slider("Margin (px)", 0, 40, _DEFAULTS.shape_margin)
    st.markdown(
        '<div class="slider-desc">White gap between neighbouring shapes.</div>',
        unsafe_allow_html=True,
    )

st.markdown("---")

# -- Upload ------------------------------------------------------------
uploaded = st.file_uploader(
    "Select artwork", type=["jpg", "jpeg", "png", "webp", "bmp", "gif", "jfif"],
)

# Persist upload in session state so control changes don't clear it
if uploaded is not None:
    st.session_state.uploaded_data = uploaded.getvalue()
elif "uploaded_data" not in st.session_state:
    st.session_state.uploaded_data = None

if st.session_state.uploaded_data is not None:
    try:
        source = decode_image(st.session_state.uploaded_data, _DEFAULTS.max_width)
    except MosaicError as exc:
        st.error(str(exc))
        st.stop()

    h, w = source.shape[:2]
    cfg = MosaicConfig(
        sample_stride=stride, shape_size=size, shape_margin=margin, shape=shape,
    )

    if st.button("COMPOSE", type="primary", use_container_width=True):
        t0 = time.perf_counter()
        mosaic = build_mosaic(source, cfg)
        elapsed = time.perf_counter() - t0

        st.image(_add_passepartout(mosaic.image, border=28), use_container_width=True)
        mw, mh = mosaic.size
        st.markdown(
            f'<div class="catalogue-detail">'
            f"{_SHAPE_LABELS[shape]}, {mw} &times; {mh}, from {w} &times; {h}"
            f"</div>",
            unsafe_allow_html=True,
        )

        _, dl_col, _ = st.columns([1, 2, 1])
        with dl_col:
            st.download_button(
                "SAVE ART",
                data=mosaic.encode_png(),
                file_name=mosaic_filename(shape),
                mime="image/png",
                use_container_width=True,
            )

        m1, m2, m3 = st.columns(3)
        m1.metric("Source", f"{w} × {h}")
        m2.metric("Mosaic", f"{mw} × {mh}")
        m3.metric("Time", f"{elapsed:.1f} s")
    else:
        st.image(source, use_container_width=True)

else:
    st.caption("Select an artwork to begin.")
