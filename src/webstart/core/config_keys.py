"""Deployment configuration property keys."""

# Runtime manager
JVM_DOWNLOAD_SERVER = "ows.jvm.manager.server.default"
ALLOW_DOWNLOAD_SERVER_FROM_JNLP = "ows.jvm.manager.server.allowFromJnlp"
JVM_VENDOR = "ows.jvm.manager.vendor"
JVM_UPDATE_STRATEGY = "ows.jvm.manager.updateStrategy"
JVM_SUPPORTED_VERSION_RANGE = "ows.jvm.manager.versionRange"

# Proxy
PROXY_HTTP_HOST = "deployment.proxy.http.host"
PROXY_HTTP_PORT = "deployment.proxy.http.port"
PROXY_BYPASS_LOCAL = "deployment.proxy.bypass.local"
PROXY_TYPE = "deployment.proxy.type"
PROXY_AUTO_CONFIG_URL = "deployment.proxy.auto.config.url"

# Cache
CACHE_MAX_SIZE = "deployment.cache.max.size"
CACHE_COMPRESSION_ENABLED = "deployment.cache.compression.enabled"

# Security
HTTPS_DONT_ENFORCE = "deployment.https.noenforce"
ASSUME_FILE_STEM_IN_CODEBASE = "deployment.assumeFileSystemInCodebase"
SECURITY_SERVER_WHITELIST = "deployment.security.whitelist"

# Update checks for webstart itself
CHECK_FOR_UPDATE = "ows.update.activated"
CHECK_FOR_UPDATE_NOW = "ows.update.checknow"
UPDATE_STRATEGY_SETTINGS = "ows.update.strategy.settings"
UPDATE_STRATEGY_LAUNCH = "ows.update.strategy.launch"

# Launcher
RUNNER_JAR = "webstart.runner.jar"

# Bootstrap bookkeeping, never imported from the installer
LAST_BOOTSTRAP_TIMESTAMP = "lastBootstrapTimestamp"

# Keys seeded from installer variables on the first start after installation
IMPORTED_KEYS: tuple[str, ...] = (
    JVM_DOWNLOAD_SERVER,
    ALLOW_DOWNLOAD_SERVER_FROM_JNLP,
    JVM_VENDOR,
    JVM_UPDATE_STRATEGY,
    JVM_SUPPORTED_VERSION_RANGE,
    PROXY_HTTP_HOST,
    PROXY_HTTP_PORT,
    PROXY_BYPASS_LOCAL,
    PROXY_TYPE,
    PROXY_AUTO_CONFIG_URL,
    CACHE_MAX_SIZE,
    CACHE_COMPRESSION_ENABLED,
    HTTPS_DONT_ENFORCE,
    ASSUME_FILE_STEM_IN_CODEBASE,
    SECURITY_SERVER_WHITELIST,
    CHECK_FOR_UPDATE,
    CHECK_FOR_UPDATE_NOW,
    UPDATE_STRATEGY_SETTINGS,
    UPDATE_STRATEGY_LAUNCH,
)
