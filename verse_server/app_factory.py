"""
Application Factory for creating the Flask app instance.
"""
import logging
import time

from flask import Flask, g, jsonify
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TimeElapsedColumn

from verse_matcher.api.quran_cloud import QuranCloudClient
from verse_matcher.exceptions import VerseMatcherError
from verse_matcher.matching import VerseMatcher
from verse_matcher.search import CorpusSearchService
from verse_server.config import HOST, PORT
from verse_server.utils.logging_config import setup_logging, get_console, get_module_blocker_filter
from verse_server.utils.transcriber import WhisperTranscriber

from verse_server.routes.health import health_bp
from verse_server.routes.info import info_bp
from verse_server.routes.quran import quran_bp
from verse_server.routes.search import search_bp
from verse_server.routes.transcribe import transcribe_bp
from verse_server.routes.voice_command import voice_command_bp

logger = logging.getLogger(__name__)

# Loader modules whose INFO chatter would tear the progress display
MODULES_TO_SILENCE = [
    "verse_matcher.data",
    "verse_matcher.matching",
    "verse_matcher.search",
]


def _register_timing(app: Flask):
    @app.before_request
    def before_request_timing():
        g.start_time = time.perf_counter()

    @app.after_request
    def after_request_timing(response):
        if hasattr(g, 'start_time'):
            elapsed_ms = (time.perf_counter() - g.start_time) * 1000
            response.headers["X-Response-Time-MS"] = f"{elapsed_ms:.2f}"

            if response.is_json:
                data = response.get_json(silent=True)
                if isinstance(data, dict):
                    data['response_time_ms'] = round(elapsed_ms, 2)
                    response.set_data(jsonify(data).get_data())
        return response


def _register_error_handlers(app: Flask):
    @app.errorhandler(413)
    def file_too_large(error):
        max_mb = app.config.get('MAX_CONTENT_LENGTH', 0) / (1024 * 1024)
        return jsonify({
            'error': 'File too large',
            'message': f'Audio file must be less than {max_mb:g}MB',
        }), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'error': 'Method not allowed'}), 405


def create_app(config_object=None, debug_mode=False):
    """Create and configure an instance of the Flask application.

    Args:
        config_object: Optional overrides, either a mapping or an object
            with upper-case attributes.
        debug_mode: Enables Flask debug mode and DEBUG logging.
    """
    _console = get_console()
    _module_blocker = get_module_blocker_filter()

    setup_logging(debug_mode=debug_mode)

    app = Flask(__name__)
    _register_timing(app)
    _register_error_handlers(app)

    app.config.from_pyfile('config.py', silent=True)
    if isinstance(config_object, dict):
        app.config.from_mapping(config_object)
    elif config_object is not None:
        app.config.from_object(config_object)
    app.config['DEBUG'] = debug_mode

    _console.print(f"[bold blue]🚀 Initializing Quran Verse Matcher Server...[/bold blue]"
                   f"{' [bold yellow]🔧 DEBUG MODE ENABLED[/bold yellow]' if debug_mode else ''}")

    matcher_status = "Error"
    corpus_status = "Error"
    transcriber_status = "Error"
    blueprints_status = "Pending"

    app.verse_matcher = None
    app.search_service = None
    app.transcriber = None
    app.quran_client = None

    _module_blocker.set_blocked_prefixes(MODULES_TO_SILENCE)
    try:
        _module_blocker.set_blocking(True)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
            TimeElapsedColumn(),
            console=_console,
            transient=False
        ) as progress:
            # --- Task 1: Phrase table and verse matcher ---
            task1 = progress.add_task("📖 Loading Phrase Table...", total=1)
            app.quran_client = QuranCloudClient()
            try:
                app.verse_matcher = VerseMatcher.from_config(
                    phrases_path=app.config.get('PHRASES_PATH'),
                    surahs_path=app.config.get('SURAHS_PATH'),
                    enable_remote=app.config.get('REMOTE_SEARCH_ENABLED', True),
                    client=app.quran_client,
                )
                remote = "remote on" if app.verse_matcher.remote_search else "remote off"
                matcher_status = f"OK ({len(app.verse_matcher.phrase_matcher)} phrases, {remote})"
                progress.update(task1, completed=1, description="📖 Loading Phrase Table... [green]OK[/green]")
            except VerseMatcherError as e:
                logger.error(f"CRITICAL: Failed to build verse matcher: {e}", exc_info=debug_mode)
                progress.update(task1, completed=1, description="📖 Loading Phrase Table... [red]Error[/red]")

            # --- Task 2: Corpus search index ---
            task2 = progress.add_task("📦 Loading Quran Corpus...", total=1)
            app.search_service = CorpusSearchService(
                normalize_arabic=app.config.get('SEARCH_NORMALIZE_ARABIC', False),
            )
            try:
                count = app.search_service.load_file(app.config.get('CORPUS_PATH'))
                corpus_status = f"OK ({count} verses)"
                progress.update(task2, completed=1, description="📦 Loading Quran Corpus... [green]OK[/green]")
            except VerseMatcherError as e:
                logger.error(f"CRITICAL: Failed to load Quran corpus: {e}", exc_info=debug_mode)
                progress.update(task2, completed=1, description="📦 Loading Quran Corpus... [red]Error[/red]")

            # --- Task 3: Transcriber ---
            task3 = progress.add_task("🎙️ Configuring Transcriber...", total=1)
            app.transcriber = WhisperTranscriber(
                api_key=app.config.get('OPENAI_API_KEY'),
                model=app.config.get('WHISPER_MODEL', 'whisper-1'),
                placeholder=app.config.get('TRANSCRIPTION_PLACEHOLDER', ''),
            )
            if app.transcriber.is_configured:
                transcriber_status = f"OK ({app.transcriber.model})"
                progress.update(task3, completed=1, description="🎙️ Configuring Transcriber... [green]OK[/green]")
            else:
                transcriber_status = "Not configured (placeholder text)"
                progress.update(task3, completed=1, description="🎙️ Configuring Transcriber... [yellow]No API key[/yellow]")

            # --- Task 4: Register Blueprints ---
            task4 = progress.add_task("🔌 Registering API Blueprints...", total=1)
            app.register_blueprint(health_bp)
            app.register_blueprint(info_bp)
            app.register_blueprint(quran_bp)
            app.register_blueprint(transcribe_bp)
            app.register_blueprint(search_bp)
            app.register_blueprint(voice_command_bp)
            blueprints_status = "OK"
            progress.update(task4, completed=1, description="🔌 Registering API Blueprints... [green]OK[/green]")

    finally:
        _module_blocker.set_blocking(False)
        logger.debug("Deactivated module log blocker.")

    host = app.config.get('HOST', HOST)
    port = app.config.get('PORT', PORT)
    panel_title = "Server Ready" + (" [DEBUG MODE]" if debug_mode else "")
    panel_border_style = "yellow" if debug_mode else "green"
    panel_content = (
        f"Status:        [bold {panel_border_style}]{'Online (Debug)' if debug_mode else 'Online'}[/bold {panel_border_style}]\n"
        f"Verse Matcher: {matcher_status}\n"
        f"Quran Corpus:  {corpus_status}\n"
        f"Transcriber:   {transcriber_status}\n"
        f"Blueprints:    {blueprints_status}\n"
        f"Listening on:  [link=http://{host}:{port}]http://{host}:{port}[/link]"
    )
    _console.print(Panel(panel_content, title=panel_title, border_style=panel_border_style, expand=False))

    return app
