"""GraphQL documents sent to the Live Search service.

The document text is a protocol contract with the service. Changing a
field set here changes what every caller receives.

  PRODUCT_SEARCH_QUERY      productSearch with items, facets and suggestions
  ATTRIBUTE_METADATA_QUERY  sortable and filterable attribute metadata
  REFINE_PRODUCT_QUERY      configurable product refinement by selected options
"""

_PRODUCT_VIEW_FRAGMENT = """
fragment ProductView on ProductSearchItem {
  productView {
    __typename
    sku
    name
    inStock
    url
    urlKey
    images {
      label
      url
      roles
    }
    ... on ComplexProductView {
      priceRange {
        maximum {
          final { amount { value currency } }
          regular { amount { value currency } }
        }
        minimum {
          final { amount { value currency } }
          regular { amount { value currency } }
        }
      }
      options {
        id
        title
        values {
          title
          ... on ProductViewOptionValueSwatch {
            id
            inStock
            type
            value
          }
        }
      }
    }
    ... on SimpleProductView {
      price {
        final { amount { value currency } }
        regular { amount { value currency } }
      }
    }
  }
  highlights {
    attribute
    value
    matched_words
  }
}
"""

_FACETS_FRAGMENT = """
fragment Facets on Aggregation {
  title
  attribute
  buckets {
    title
    __typename
    ... on CategoryView {
      name
      count
      path
    }
    ... on ScalarBucket {
      count
    }
    ... on RangeBucket {
      from
      to
      count
    }
    ... on StatsBucket {
      min
      max
    }
  }
}
"""

PRODUCT_SEARCH_QUERY = """
query productSearch(
  $phrase: String!
  $pageSize: Int
  $currentPage: Int = 1
  $filter: [SearchClauseInput!]
  $sort: [ProductSearchSortInput!]
  $context: QueryContextInput
) {
  productSearch(
    phrase: $phrase
    page_size: $pageSize
    current_page: $currentPage
    filter: $filter
    sort: $sort
    context: $context
  ) {
    total_count
    items {
      ...ProductView
    }
    facets {
      ...Facets
    }
    page_info {
      current_page
      page_size
      total_pages
    }
    suggestions
  }
}
""" + _PRODUCT_VIEW_FRAGMENT + _FACETS_FRAGMENT

ATTRIBUTE_METADATA_QUERY = """
query attributeMetadata {
  attributeMetadata {
    sortable {
      label
      attribute
      numeric
    }
    filterableInSearch {
      label
      attribute
      numeric
    }
  }
}
"""

REFINE_PRODUCT_QUERY = """
query refineProduct(
  $optionIds: [String!]!
  $sku: String!
) {
  refineProduct(
    optionIds: $optionIds
    sku: $sku
  ) {
    __typename
    id
    sku
    name
    inStock
    url
    urlKey
    images {
      label
      url
      roles
    }
    ... on SimpleProductView {
      price {
        final { amount { value currency } }
        regular { amount { value currency } }
      }
    }
    ... on ComplexProductView {
      options {
        id
        title
        required
        values {
          id
          title
        }
      }
      priceRange {
        maximum {
          final { amount { value currency } }
          regular { amount { value currency } }
        }
        minimum {
          final { amount { value currency } }
          regular { amount { value currency } }
        }
      }
    }
  }
}
"""
