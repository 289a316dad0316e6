from __future__ import annotations
import streamlit as st
import logging
import pandas as pd
import numpy as np
import matplotlib.pyplot as plt
import io

from text_digest.datatypes import Summary
from text_digest.errors import DigestError
from text_digest.ingest import load_text_from_bytes
from text_digest.preprocessing import DigestConfig, preprocess_text
from text_digest.scoring import build_frequency_table, score_sentences
from text_digest.summarize import summarize, generate_summary, pick_top_sentences

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def preview(text: str, width: int = 80) -> str:
    return text[:width] + "..." if len(text) > width else text


def draw_frequency_chart(freq, top_n: int = 20):
    """Bar chart of the most frequent tokens of the document."""
    common = freq.most_common(top_n)
    fig, ax = plt.subplots(figsize=(10, 5))
    if common:
        tokens = [t for t, _ in common]
        counts = [c for _, c in common]
        ax.barh(tokens[::-1], counts[::-1], color='steelblue', alpha=0.8)
    ax.set_title(f"Top {top_n} tokens", fontsize=14, fontweight='bold')
    ax.set_xlabel("Occurrences")
    plt.tight_layout()

    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close(fig)
    return buf


def create_sidebar_controls():
    """Create sidebar controls for parameters."""
    st.sidebar.header("Parameters")
    key_points = st.sidebar.slider(
        "Key points",
        min_value=1,
        max_value=12,
        value=DigestConfig.max_key_points,
        step=1,
        help="Maximum number of key points in the digest"
    )

    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=False, help="Show detailed pipeline steps")

    return key_points, debug_mode


def debug_pipeline(text: str, cfg: DigestConfig) -> Summary:
    """Run the pipeline stage by stage and render each intermediate result."""

    # Step 1: Sanitize + segment
    st.header("Step 1: Sanitizing and Segmentation")
    with st.expander("Segmentation Details", expanded=True):
        with st.spinner("Processing text..."):
            doc = preprocess_text(text, cfg)

        st.success(f"Segmented {len(doc.sentences)} sentences")

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Raw Characters", len(text))
        with col2:
            st.metric("Sanitized Characters", len(doc.sanitized_text))
        with col3:
            st.metric("Sentences Kept", len(doc.sentences))

        sentences_df = pd.DataFrame([
            {
                "Sentence #": s.idx + 1,
                "Text": preview(s.text),
                "Tokens": len(s.tokens),
                "Processed Tokens": ", ".join(s.tokens[:8]) + ("..." if len(s.tokens) > 8 else ""),
            }
            for s in doc.sentences
        ])
        st.dataframe(sentences_df, use_container_width=True)

    # Step 2: Frequency table
    st.header("Step 2: Token Frequencies")
    with st.expander("Frequency Details", expanded=True):
        freq = build_frequency_table(doc)

        col1, col2 = st.columns(2)
        with col1:
            st.metric("Unique Tokens", len(freq))
        with col2:
            st.metric("Total Tokens", sum(freq.values()))

        st.image(draw_frequency_chart(freq), caption="Most frequent tokens")
        freq_df = pd.DataFrame(freq.most_common(), columns=["Token", "Frequency"])
        st.dataframe(freq_df, use_container_width=True, height=200)

    # Step 3: Scores
    st.header("Step 3: Sentence Scoring")
    with st.expander("Scoring Details", expanded=True):
        scores = score_sentences(doc, freq)
        values = list(scores.values())

        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("Scored Sentences", len(scores))
        with col2:
            st.metric("Unscored", len(doc.sentences) - len(scores))
        with col3:
            st.metric("Mean Score", f"{np.mean(values):.3f}" if values else "-")
        with col4:
            st.metric("Std Score", f"{np.std(values):.3f}" if values else "-")

    # Step 4: Selection
    st.header("Step 4: Key Point Selection")
    with st.expander("Selection Details", expanded=True):
        selected = {s.idx for s in pick_top_sentences(doc, scores, limit=cfg.max_key_points)}
        selection_df = pd.DataFrame([
            {
                "Sentence #": s.idx + 1,
                "Score": f"{scores[s.idx]:.3f}" if s.idx in scores else "-",
                "Selected": "yes" if s.idx in selected else "no",
                "Text": s.text,
            }
            for s in doc.sentences
        ])
        st.dataframe(selection_df, use_container_width=True)

    return generate_summary(doc, scores, cfg)


def render_summary(summary: Summary):
    st.header("Digest")
    st.subheader(summary.title_suggestion)
    st.markdown("**Thèse**")
    st.write(summary.thesis)
    st.markdown("**Points clés**")
    for point in summary.key_points:
        st.markdown(f"- {point}")
    st.markdown("**Appel à l'action**")
    st.write(summary.call_to_action)
    with st.expander("JSON"):
        st.json(summary.to_dict())


def main():
    st.title("Synthèse de chapitre")
    st.write("Upload a PDF to get a title, a thesis, key points and a call to action")

    key_points, debug_mode = create_sidebar_controls()
    cfg = DigestConfig(max_key_points=key_points)

    uploaded_file = st.file_uploader(
        "Choose a file",
        type=['pdf', 'txt', 'md', 'rtf'],
        help="PDF up to 10 MB; .txt, .md and .rtf are accepted as well"
    )

    if uploaded_file is not None:
        if st.button("Generate Digest", type="primary"):
            try:
                text = load_text_from_bytes(uploaded_file.name, uploaded_file.getvalue())
                if debug_mode:
                    st.markdown("---")
                    st.title("Pipeline Debug Mode")
                    result = debug_pipeline(text, cfg)
                else:
                    with st.spinner("Generating digest..."):
                        result = summarize(text, cfg)

                st.markdown("---")
                render_summary(result)
            except DigestError as e:
                st.error(str(e))
            except Exception as e:
                st.error("Une erreur inattendue empêche la génération de la synthèse.")
                st.exception(e)

if __name__ == "__main__":
    main()
