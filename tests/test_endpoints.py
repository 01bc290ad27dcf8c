import pytest

from textapi.api.errors import ParameterError, RemoteError
from textapi.api.models import (
    ClassifyByTaxonomyParams,
    ClassifyParams,
    ConceptsParams,
    EntitiesParams,
    ExtractParams,
    HashtagsParams,
    ImageTagsParams,
    LanguageParams,
    MicroformatsParams,
    RelatedParams,
    SentimentParams,
    SummarizeParams,
    UnsupervisedClassifyParams,
)

from .conftest import INVALID_URL_ERROR


def test_sentiment(textapi, fake_server):
    with pytest.raises(ParameterError):
        textapi.sentiment(SentimentParams())
    assert fake_server.requests == [], "Validation must happen before any request"

    response = textapi.sentiment(SentimentParams(text="John is a very good football player!", mode="document"))
    assert response.polarity == "positive"
    assert response.polarity_confidence == 0.9999936601153382
    assert response.subjectivity == "subjective"
    form = fake_server.last_form()
    assert form["text"] == "John is a very good football player!"
    assert form["mode"] == "document"


def test_language(textapi):
    with pytest.raises(ParameterError):
        textapi.language(LanguageParams())
    response = textapi.language(LanguageParams(text="John is a very good football player!"))
    assert response.language == "en"
    assert response.confidence == 0.9999984582883709


def test_extract(textapi, fake_server):
    with pytest.raises(ParameterError) as exc_info:
        textapi.extract(ExtractParams())
    assert str(exc_info.value) == "you must either provide url or html"

    response = textapi.extract(ExtractParams(url="http://example.com/"))
    assert response.author == "Alex Wilhelm"
    assert response.feeds == ["http://techcrunch.com/feed/"]
    form = fake_server.last_form()
    assert form["url"] == "http://example.com/"
    assert form["best_image"] == "false"

    textapi.extract(html="<html></html>", url="http://example.com/", best_image=True)
    form = fake_server.last_form()
    assert form["html"] == "<html></html>"
    assert "url" not in form
    assert form["best_image"] == "true"


def test_classify(textapi, fake_server):
    with pytest.raises(ParameterError):
        textapi.classify(ClassifyParams())
    response = textapi.classify(ClassifyParams(text="Just a random piece of text", url="http://example.com/"))
    assert response.categories[0].code == "04017000"
    assert response.categories[0].confidence == 0.21
    form = fake_server.last_form()
    assert form["text"] == "Just a random piece of text"
    assert "url" not in form
    assert "language" not in form


def test_concepts(textapi, fake_server):
    with pytest.raises(ParameterError):
        textapi.concepts(ConceptsParams())
    response = textapi.concepts(ConceptsParams(text="Another piece of random text", language="en"))
    concept = response.concepts["http://dbpedia.org/resource/Apple_Inc."]
    assert concept.surface_forms[0].string == "Apple"
    assert concept.support == 16181
    assert fake_server.last_form()["language"] == "en"


def test_entities(textapi):
    with pytest.raises(RemoteError) as exc_info:
        textapi.entities(EntitiesParams(url="invalid"))
    assert exc_info.value.message == INVALID_URL_ERROR
    assert exc_info.value.status_code == 400

    response = textapi.entities(EntitiesParams(url="invalid", text="Valid text"))
    assert response.entities["organization"] == ["AYLIEN"]


def test_hashtags(textapi):
    with pytest.raises(ParameterError):
        textapi.hashtags(HashtagsParams())
    response = textapi.hashtags(HashtagsParams(text="Google SDK"))
    assert response.hashtags == ["#Google", "#SoftwareDevelopmentKit"]


def test_related(textapi, fake_server):
    with pytest.raises(ParameterError) as exc_info:
        textapi.related(RelatedParams())
    assert str(exc_info.value) == "you must provide a phrase"

    response = textapi.related(RelatedParams(phrase="android"))
    assert response.related[0].phrase == "ios"
    assert response.related[0].distance == 0.3317
    assert "count" not in fake_server.last_form()

    textapi.related(phrase="android", count=5)
    assert fake_server.last_form()["count"] == "5"


def test_summarize(textapi, fake_server):
    with pytest.raises(ParameterError):
        textapi.summarize(SummarizeParams())

    with pytest.raises(RemoteError) as exc_info:
        textapi.summarize(SummarizeParams(url="invalid"))
    assert exc_info.value.message == INVALID_URL_ERROR

    with pytest.raises(ParameterError):
        textapi.summarize(SummarizeParams(title="title"))

    request_count = len(fake_server.requests)
    response = textapi.summarize(SummarizeParams(title="title", text="text"))
    assert response.sentences == ["First sentence.", "Second sentence."]
    assert len(fake_server.requests) == request_count + 1
    form = fake_server.last_form()
    assert form["title"] == "title"
    assert form["text"] == "text"
    assert form["mode"] == "default"
    assert "sentences_number" not in form


def test_summarize_options(textapi, fake_server):
    textapi.summarize(SummarizeParams(
        url="http://example.com/article",
        title="ignored",
        text="ignored",
        mode="short",
        number_of_sentences=3,
        percentage_of_sentences=20,
    ))
    form = fake_server.last_form()
    assert form["url"] == "http://example.com/article"
    assert "title" not in form
    assert form["mode"] == "short"
    assert form["sentences_number"] == "3"
    assert form["sentences_percentage"] == "20"


def test_unsupervised_classification(textapi, fake_server):
    with pytest.raises(ParameterError):
        textapi.unsupervised_classify(UnsupervisedClassifyParams())

    params = UnsupervisedClassifyParams(text="Samsung Galaxy S II", classes=["android"])
    with pytest.raises(ParameterError) as exc_info:
        textapi.unsupervised_classify(params)
    assert str(exc_info.value) == "you must provide at least two classes"
    assert fake_server.requests == []

    params = UnsupervisedClassifyParams(text="Samsung Galaxy S II", classes=["android", "ios"], number_of_concepts=10)
    response = textapi.unsupervised_classify(params)
    assert [c.label for c in response.classes] == ["android", "ios"]
    assert response.classes[0].score == 0.2578386051300856
    assert fake_server.last_request.url.path == "/api/v1/classify/unsupervised"
    form = fake_server.last_form()
    assert form.get_list("class") == ["android", "ios"]
    assert form["number_of_concepts"] == "10"


def test_microformats(textapi):
    with pytest.raises(ParameterError):
        textapi.microformats(MicroformatsParams())
    response = textapi.microformats(MicroformatsParams(url="http://aylien.com/"))
    assert response.hcards[0].full_name == "AYLIEN"
    assert response.hcards[0].address.country_name == "Ireland"


def test_image_tags(textapi, fake_server):
    with pytest.raises(ParameterError) as exc_info:
        textapi.image_tags(ImageTagsParams())
    assert str(exc_info.value) == "you must provide a url"

    response = textapi.image_tags(ImageTagsParams(url="https://developer.aylien.com/images/logo-small.png"))
    assert [tag.tag for tag in response.tags] == ["logo", "text"]
    assert response.image == "https://developer.aylien.com/images/logo-small.png"
    assert fake_server.last_request.url.path == "/api/v1/image-tags"


def test_classify_by_taxonomy(textapi, fake_server):
    with pytest.raises(ParameterError):
        textapi.classify_by_taxonomy(ClassifyByTaxonomyParams())

    params = ClassifyByTaxonomyParams(url="http://techcrunch.com/2015/07/16/microsoft-will-never-give-up-on-mobile")
    with pytest.raises(ParameterError) as exc_info:
        textapi.classify_by_taxonomy(params)
    assert str(exc_info.value) == "you must specify the taxonomy"

    params.taxonomy = "iab-qag"
    response = textapi.classify_by_taxonomy(params)
    assert response.taxonomy == "iab-qag"
    assert response.categories[0].id == "IAB19"
    assert response.categories[0].confident is True
    assert fake_server.last_request.url.path == "/api/v1/classify/iab-qag"
    assert fake_server.last_form()["url"] == params.url


def test_keyword_arguments(textapi, fake_server):
    textapi.classify.by_taxonomy(text="Some text", taxonomy="iab-qag", language="de")
    form = fake_server.last_form()
    assert form["language"] == "de"
    assert form["text"] == "Some text"


def test_keyword_arguments_override_params(textapi, fake_server):
    params = SentimentParams(text="a")
    textapi.sentiment(params, mode="document")
    form = fake_server.last_form()
    assert form["text"] == "a"
    assert form["mode"] == "document"
    assert params.mode is None, "The caller's params must not be modified"

    textapi.related(RelatedParams(phrase="android", count=2), count=7)
    assert fake_server.last_form()["count"] == "7"
