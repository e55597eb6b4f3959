class DocLinks:
    DOCS_HOST = "https://docs.gradle.org"
    BASE_URL = DOCS_HOST + "/{version}"
    USERGUIDE = "{base_url}/userguide/{id}.html"
    DSL_PROPERTY = "{base_url}/dsl/{type_name}.html#{type_name}:{property}"
    SAMPLE_INDEX = "{base_url}/samples"
    SAMPLE = "{base_url}/samples/sample_{id}.html"
    RECOMMENDATION = "For more information{topic}, please refer to {url} in the Gradle documentation."
