from typing import Optional

from .client_base import BaseClient, Form
from .errors import ParameterError
from .models.classification import (
    ClassifyByTaxonomyParams,
    ClassifyByTaxonomyResponse,
    ClassifyParams,
    ClassifyResponse,
    UnsupervisedClassifyParams,
    UnsupervisedClassifyResponse,
)


class Classification(BaseClient):
    """
    Client to interact with the classification endpoints.
    """
    def __call__(self, *args, **kwargs):
        return self.classify(*args, **kwargs)

    def classify(self, params: Optional[ClassifyParams] = None, **kwargs) -> ClassifyResponse:
        """Classify a document into IPTC subject codes."""
        params = self.resolve_params(ClassifyParams, params, kwargs)
        form: Form = {}
        self.text_or_url(form, params.text, params.url)
        self.add_if_set(form, "language", params.language)
        return self.call("/classify", form, ClassifyResponse)

    def by_taxonomy(self, params: Optional[ClassifyByTaxonomyParams] = None, **kwargs) -> ClassifyByTaxonomyResponse:
        """
        Classify a document according to a taxonomy.
        Taxonomy is one of: [ iab-qag, iptc-subjectcode ]
        """
        params = self.resolve_params(ClassifyByTaxonomyParams, params, kwargs)
        form: Form = {}
        self.text_or_url(form, params.text, params.url)
        if not params.taxonomy:
            raise ParameterError("you must specify the taxonomy")
        self.add_if_set(form, "language", params.language)
        return self.call(f"/classify/{params.taxonomy}", form, ClassifyByTaxonomyResponse)

    def unsupervised(self, params: Optional[UnsupervisedClassifyParams] = None, **kwargs) -> UnsupervisedClassifyResponse:
        """Pick the most semantically relevant of the given class labels."""
        params = self.resolve_params(UnsupervisedClassifyParams, params, kwargs)
        form: Form = {}
        self.text_or_url(form, params.text, params.url)
        self.add_if_set(form, "number_of_concepts", params.number_of_concepts)
        if len(params.classes) < 2:
            raise ParameterError("you must provide at least two classes")
        form["class"] = list(params.classes)
        return self.call("/classify/unsupervised", form, UnsupervisedClassifyResponse)
