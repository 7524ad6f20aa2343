import logging
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from azure.monitor.opentelemetry.exporter import AzureMonitorTraceExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from frontend.configuration.config import Config

# Configure logger
logger = logging.getLogger("frontend")
if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    logger.addHandler(handler)
logger.setLevel(logging.INFO)

# Resource to identify this service
resource = Resource(attributes={
    SERVICE_NAME: "photobooking-frontend"
})

def setup_tracing():
    """Set up OpenTelemetry tracing, exporting to Azure Monitor when configured."""
    try:
        trace_provider = TracerProvider(resource=resource)
        trace.set_tracer_provider(trace_provider)

        if Config.APPLICATIONINSIGHTS_CONNECTION_STRING:
            azure_exporter = AzureMonitorTraceExporter(
                connection_string=Config.APPLICATIONINSIGHTS_CONNECTION_STRING
            )
            trace_provider.add_span_processor(BatchSpanProcessor(azure_exporter))
            logger.info("Azure Monitor exporter attached")
        else:
            logger.info("No Application Insights connection string, spans stay local")

        # Every upstream API call goes through httpx
        HTTPXClientInstrumentor().instrument()

        return trace.get_tracer(__name__)
    except Exception as e:
        logger.error(f"Failed to set up tracing: {str(e)}")
        return trace.get_tracer(__name__)

# Initialize tracer
tracer = setup_tracing()

def instrument_fastapi(app):
    """Instrument the view application for request tracing."""
    try:
        FastAPIInstrumentor.instrument_app(app)
        logger.info("FastAPI app instrumented successfully")
    except Exception as e:
        logger.error(f"Failed to instrument FastAPI app: {str(e)}")

def start_span(name, context=None, kind=None, attributes=None):
    """Start a new trace span with the specified name and attributes."""
    return tracer.start_as_current_span(name, context=context, kind=kind, attributes=attributes)

def log_event(event_name, properties=None):
    """Record a named event as a span and a log line."""
    try:
        with tracer.start_as_current_span(event_name) as span:
            if properties:
                for key, value in properties.items():
                    span.set_attribute(key, str(value))
        logger.info(f"Event: {event_name}", extra={"custom_properties": properties})
    except Exception as e:
        logger.error(f"Failed to log event '{event_name}': {str(e)}")

def log_exception(exception, properties=None):
    """Record an exception on a span and in the log."""
    try:
        with tracer.start_as_current_span("exception") as span:
            span.record_exception(exception)
            if properties:
                for key, value in properties.items():
                    span.set_attribute(key, str(value))
            span.set_status(trace.StatusCode.ERROR, str(exception))
        logger.error(f"Exception: {str(exception)}", exc_info=exception,
                     extra={"custom_properties": properties})
    except Exception as e:
        logger.error(f"Failed to log exception: {str(e)}")

def log_metric(metric_name, value, properties=None):
    """Record a numeric value, e.g. list sizes returned by the API."""
    try:
        with tracer.start_as_current_span(f"metric:{metric_name}") as span:
            span.set_attribute("metric.value", value)
            if properties:
                for key, val in properties.items():
                    span.set_attribute(key, str(val))
        logger.info(f"Metric: {metric_name}={value}",
                    extra={"custom_properties": properties})
    except Exception as e:
        logger.error(f"Failed to log metric '{metric_name}': {str(e)}")
