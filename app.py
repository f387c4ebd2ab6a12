import logging

import gradio as gr

from gradient_bin_viewer.config import load_settings
from gradient_bin_viewer.handlers import (
    download_gradient_handler,
    import_gradient_handler,
    retrieve_gradient_handler,
)

settings = load_settings()
logging.basicConfig(level=settings.log_level, format=settings.log_format)

# --- UI Definition ---
with gr.Blocks(title="Gradient Bin Viewer") as demo:
    gr.Markdown("# Gradient Bin Viewer")
    gr.Markdown("Fetch a gradient stored in a JSONBin bin (XML or JSON), preview it and download it as structured JSON.")

    # State
    document_state = gr.State()

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Retrieve")
            bin_id_input = gr.Textbox(label="Bin ID", placeholder="e.g. 65f1c0...")
            retrieve_btn = gr.Button("Retrieve", variant="primary")
            status_msg = gr.Textbox(label="Status", interactive=False)
            import_file = gr.File(label="Or import an exported JSON file", file_types=[".json"])

            gr.Markdown("### 2. Export")
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="gradient.json")
            download_btn = gr.Button("Download structured JSON", visible=False)
            download_output = gr.File(label="Download Result")

        # Right Panel: Result
        with gr.Column(scale=1):
            gr.Markdown("### Result")
            visual = gr.HTML()
            document_preview = gr.JSON(label="Structured document")

    retrieve_btn.click(
        fn=lambda bin_id: retrieve_gradient_handler(bin_id, settings=settings),
        inputs=[bin_id_input],
        outputs=[document_state, status_msg, visual, document_preview, download_btn],
    )

    import_file.upload(
        fn=import_gradient_handler,
        inputs=[import_file],
        outputs=[document_state, status_msg, visual, document_preview, download_btn],
    )

    download_btn.click(
        fn=download_gradient_handler,
        inputs=[document_state, output_filename],
        outputs=[download_output, status_msg],
    )

if __name__ == "__main__":
    demo.launch()
