import io
import logging

from flask import Flask, jsonify, request, send_file
from flask_cors import CORS

from liquidation import LiquidationProcessor, TemplateError
from liquidation import config
from liquidation.court import COURT_NAME, JUDGES
from liquidation.models import CaseRecord

# Configure logging
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = Flask(__name__)

# Enable CORS for all routes (the form front-end runs on a different origin)
CORS(app)

# Initialize the liquidation processor
processor = LiquidationProcessor()


@app.route("/", methods=["GET"])
@app.route("/api", methods=["GET"])
def api_info():
    """API information endpoint"""
    return jsonify({
        "status": "ok",
        "message": f"Liquidazione gratuito patrocinio - {COURT_NAME}",
        "version": "2.3",
        "endpoints": {
            "liquidate": "/liquidate [POST]",
            "decree": "/decree?format=docx|text|json [POST]",
            "judges": "/judges [GET]",
            "health": "/health [GET]"
        }
    }), 200


@app.route("/health", methods=["GET"])
def health():
    """Health check for monitoring"""
    return jsonify({"status": "healthy"}), 200


@app.route("/judges", methods=["GET"])
def judges():
    """Court roster for the judge selector"""
    return jsonify({"court": COURT_NAME, "judges": list(JUDGES)}), 200


def _read_case():
    return request.get_json(force=True, silent=True)


@app.route("/liquidate", methods=["POST"])
def liquidate():
    """
    Compute the liquidation for a case record
    """
    try:
        input_data = _read_case()
        if not input_data:
            return jsonify({
                "error": "No input data provided",
                "status": "failed"
            }), 400

        rg_dib = input_data.get("rg_dib") or "unnumbered"
        logger.info(f"Liquidating case: {rg_dib}")

        result = processor.process_from_dict(input_data)

        logger.info(f"Case liquidated successfully: {rg_dib}")

        return jsonify(result), 200

    except ValueError as e:
        # Validation errors from engine
        logger.error(f"Validation error: {str(e)}")
        return jsonify({
            "error": str(e),
            "status": "validation_failed"
        }), 400

    except Exception as e:
        # Unexpected errors
        logger.error(f"Processing error: {str(e)}", exc_info=True)
        return jsonify({
            "error": "An unexpected error occurred during processing",
            "status": "failed"
        }), 500


@app.route("/decree", methods=["POST"])
def decree():
    """
    Render the liquidation decree as docx, plain text or JSON
    """
    try:
        input_data = _read_case()
        if not input_data:
            return jsonify({
                "error": "No input data provided",
                "status": "failed"
            }), 400

        output_format = request.args.get("format")
        case = CaseRecord.from_dict(input_data)
        logger.info(f"Generating decree for case: {case.rg_dib or 'unnumbered'} (format={output_format or 'auto'})")

        document = processor.generate_decree(case, output_format=output_format)

        return send_file(
            io.BytesIO(document.content),
            mimetype=document.media_type,
            as_attachment=True,
            download_name=document.filename,
        )

    except ValueError as e:
        logger.error(f"Validation error: {str(e)}")
        return jsonify({
            "error": str(e),
            "status": "validation_failed"
        }), 400

    except TemplateError as e:
        logger.error(f"Template error: {str(e)}")
        return jsonify({
            "error": str(e),
            "status": "template_error"
        }), 502

    except Exception as e:
        logger.error(f"Decree error: {str(e)}", exc_info=True)
        return jsonify({
            "error": "An unexpected error occurred during processing",
            "status": "failed"
        }), 500


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=config.PORT, debug=False)
