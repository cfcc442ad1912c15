import streamlit as st
import pandas as pd
from dotenv import load_dotenv

# Import internal modules
try:
    from string_extensions import (
        InvalidArgumentError,
        add_char_at_position,
        chars,
        chunk,
        inspect_text,
        replace_characters,
        replacing_occurrences,
        with_prefix,
    )
    from string_extensions.config import load_settings
except ImportError:
    st.error("Package not found. Run from the project root: `streamlit run app.py`")
    st.stop()

load_dotenv()

# --- 1. Page Configuration ---
st.set_page_config(
    page_title="String Extensions",
    page_icon="🔤",
    layout="wide",
    initial_sidebar_state="expanded",
)

# --- 2. Styling ---
st.markdown("""
    <style>
    #MainMenu {visibility: hidden;}
    footer {visibility: hidden;}
    div[data-testid="stMetric"] {
        background-color: #ffffff;
        padding: 15px;
        border-radius: 10px;
        border: 1px solid #eeeeee;
        box-shadow: 0 2px 4px rgba(0,0,0,0.05);
    }
    </style>
    """, unsafe_allow_html=True)

try:
    settings = load_settings()
except InvalidArgumentError as e:
    st.error(f"Configuration error: {e}")
    st.stop()

# --- 3. Sidebar: Parameters ---
with st.sidebar:
    st.title("String Extensions")
    st.caption("Pure string helpers playground")
    st.markdown("---")

    st.subheader("Masking")
    mask_begin = st.number_input("Begin", value=0, step=1)
    mask_use_end = st.checkbox("Custom end", value=False)
    mask_end = st.number_input("End", value=0, step=1, disabled=not mask_use_end)
    mask_char = st.text_input("Mask character", value=settings.replace_char, max_chars=1)

    st.subheader("Chunking")
    chunk_size = st.number_input("Chunk size", value=settings.chunk_size, step=1)

    st.subheader("Insertion")
    insert_char = st.text_input("Character", value="-", max_chars=1)
    insert_position = st.number_input("Position", value=3, min_value=0, step=1)
    insert_repeat = st.checkbox("Repeat", value=True)

    st.subheader("Prefix / Replace")
    prefix = st.text_input("Prefix", value="https://")
    search = st.text_input("Search pattern", value="")
    replacement = st.text_input("Replacement", value="")


# --- 4. Main View ---

text = st.text_area("Text", value="1234567890", height=100)

report = inspect_text(text, replace_char=mask_char or "*")

m1, m2, m3, m4 = st.columns(4)
m1.metric("Length", report.length)
m2.metric("Characters", report.grapheme_count)
m3.metric("Words", report.word_count)
m4.metric("E-mail", "valid" if report.is_valid_email else "invalid")

st.markdown("---")

tab1, tab2 = st.tabs(["🔎 Transformations", "🧩 Characters"])

with tab1:
    rows = [
        {"Operation": "Reversed", "Result": report.reversed},
        {"Operation": "Capitalized", "Result": report.capitalized},
        {"Operation": "Decapitalized", "Result": report.decapitalized},
        {"Operation": "Palindrome", "Result": "yes" if report.is_palindrome else "no"},
        {"Operation": "With prefix", "Result": with_prefix(text, prefix)},
    ]

    masked = replace_characters(
        text,
        begin=int(mask_begin),
        end=int(mask_end) if mask_use_end else None,
        replace_char=mask_char or "*",
    )
    rows.append({"Operation": "Masked", "Result": masked if masked is not None else "(too short)"})

    try:
        rows.append({"Operation": "Chunked", "Result": " | ".join(chunk(text, chunk_size=int(chunk_size)))})
    except InvalidArgumentError as e:
        st.warning(f"Chunking skipped: {e.reason}")

    if insert_char:
        rows.append({
            "Operation": "Inserted",
            "Result": add_char_at_position(text, insert_char, int(insert_position), repeat=insert_repeat),
        })

    if search:
        try:
            rows.append({
                "Operation": "Replaced",
                "Result": replacing_occurrences(text, search, replacement),
            })
        except InvalidArgumentError as e:
            st.warning(f"Replace skipped: {e.reason}")

    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)

with tab2:
    clusters = chars(text)
    if not clusters:
        st.info("👈 Type some text to see its characters.")
    else:
        st.dataframe(
            pd.DataFrame({
                "Index": range(len(clusters)),
                "Character": clusters,
                "Code points": [" ".join(f"U+{ord(c):04X}" for c in ch) for ch in clusters],
            }),
            use_container_width=True,
            hide_index=True,
        )
